#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data through the same use cases the HTTP layer calls

Features:
1. Create Cinema - one cinema the rest of the data hangs off
2. Create Users - one cinema admin and one customer
3. Create Movie - one movie owned by the cinema
4. Create Showtimes - one evening screening per day inside the booking window
"""

import asyncio
from dataclasses import dataclass
from datetime import date, time, timedelta

from movie_booking.platform.config.di import container
from movie_booking.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from movie_booking.service.movie.app.command.create_cinema_use_case import CreateCinemaUseCase
from movie_booking.service.movie.app.command.create_movie_use_case import CreateMovieUseCase
from movie_booking.service.shared_kernel.domain.booking_window import MAX_DAYS_AHEAD
from movie_booking.service.showtime.app.command.create_showtime_use_case import (
    CreateShowtimeUseCase,
)
from movie_booking.service.user.app.command.create_user_use_case import CreateUserUseCase
from movie_booking.service.user.domain.entity.user_entity import UserType


SEATS_PER_SHOWTIME = 120
TICKET_PRICE = 12.5


@dataclass
class UserConfig:
    """User seed configuration"""

    name: str
    email: str
    phone: str
    user_type: UserType


TEST_USERS = [
    UserConfig('Cinema Admin', 'admin@cinema.test', '0900000001', UserType.CINEMA_ADMIN),
    UserConfig('Demo Customer', 'customer@cinema.test', '0900000002', UserType.CUSTOMER),
]


async def create_cinema() -> str:
    print('🏢 Creating cinema...')
    cinema = await CreateCinemaUseCase(cinema_repo=container.cinema_repo()).create(
        name='Grand Cinema', location='Main Street 1'
    )
    print(f'   ✅ Created cinema: ID={cinema.id}, Name={cinema.name}')
    return cinema.id


async def create_users(cinema_id: str) -> None:
    print(f'👥 Creating {len(TEST_USERS)} users...')
    use_case = CreateUserUseCase(user_command_repo=container.user_command_repo())
    for config in TEST_USERS:
        user = await use_case.create(
            name=config.name,
            email=config.email,
            phone=config.phone,
            user_type=config.user_type,
            cinema_id=cinema_id,
        )
        print(f'   ✅ Created {user.user_type}: ID={user.id}, Email={user.email}')


async def create_movie(cinema_id: str) -> str:
    print('🎬 Creating movie...')
    movie = await CreateMovieUseCase(movie_command_repo=container.movie_command_repo()).create(
        cinema_id=cinema_id,
        title='The Batman',
        director='Matt Reeves',
        genre='Action',
        language='English',
        rating='PG-13',
        duration=176,
        description="Batman ventures into Gotham City's underworld.",
        release_date=date(2022, 3, 4),
        cast=['Robert Pattinson', 'Zoe Kravitz', 'Paul Dano'],
    )
    print(f'   ✅ Created movie: ID={movie.id}, Title={movie.title}')
    return movie.id


async def create_showtimes(*, cinema_id: str, movie_id: str) -> None:
    print('🎟️ Creating showtimes...')
    clock = container.clock()
    use_case = CreateShowtimeUseCase(
        showtime_command_repo=container.showtime_command_repo(), clock=clock
    )
    today = clock.today()
    for offset in range(MAX_DAYS_AHEAD + 1):
        showtime = await use_case.create(
            movie_id=movie_id,
            cinema_id=cinema_id,
            screen_number=1,
            show_date=today + timedelta(days=offset),
            start_time=time(20, 0),
            price=TICKET_PRICE,
            total_seats=SEATS_PER_SHOWTIME,
            available_seats=SEATS_PER_SHOWTIME,
        )
        print(f'   ✅ {showtime.show_date} 20:00 ID={showtime.id}')


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        await create_db_and_tables()
        cinema_id = await create_cinema()
        print()
        await create_users(cinema_id)
        print()
        movie_id = await create_movie(cinema_id)
        print()
        await create_showtimes(cinema_id=cinema_id, movie_id=movie_id)

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        raise SystemExit(1) from e

    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
