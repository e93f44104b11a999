# API Route Constants

# Base API
API_BASE = '/api'

# User routes
USER_BASE = f'{API_BASE}/users'
USER_GET = f'{USER_BASE}/{{user_id}}'

# Movie routes (public)
MOVIE_BASE = f'{API_BASE}/movies'
MOVIE_GET = f'{MOVIE_BASE}/{{movie_id}}'
MOVIE_SEARCH = f'{MOVIE_BASE}/search'
MOVIE_BY_CINEMA = f'{MOVIE_BASE}/cinema/{{cinema_id}}'

# Movie routes (admin)
ADMIN_MOVIE_BASE = f'{API_BASE}/admin/movies'
ADMIN_MOVIE_GET = f'{ADMIN_MOVIE_BASE}/{{movie_id}}'
ADMIN_MOVIE_SHOWTIMES = f'{ADMIN_MOVIE_BASE}/{{movie_id}}/showtimes'
ADMIN_MOVIE_SHOWTIME = f'{ADMIN_MOVIE_BASE}/{{movie_id}}/showtimes/{{showtime_id}}'

# Cinema routes (admin)
CINEMA_BASE = f'{API_BASE}/admin/cinemas'
CINEMA_GET = f'{CINEMA_BASE}/{{cinema_id}}'

# Showtime routes
SHOWTIME_BASE = f'{API_BASE}/showtimes'
SHOWTIME_GET = f'{SHOWTIME_BASE}/{{showtime_id}}'
SHOWTIME_BY_MOVIE = f'{SHOWTIME_BASE}/movie/{{movie_id}}'
SHOWTIME_BY_CINEMA = f'{SHOWTIME_BASE}/cinema/{{cinema_id}}'
SHOWTIME_REDUCE = f'{SHOWTIME_BASE}/{{showtime_id}}/reduce'
SHOWTIME_RESTORE = f'{SHOWTIME_BASE}/{{showtime_id}}/restore'

# Booking routes
BOOKING_BASE = f'{API_BASE}/bookings'
BOOKING_GET = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_BY_USER = f'{BOOKING_BASE}/user/{{user_id}}'
