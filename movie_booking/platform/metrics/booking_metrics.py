from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Booking workflow metrics

    Tracks the create-booking outcome per failure kind and the seat inventory
    mutations issued against the showtime store.
    """

    def __init__(self) -> None:
        self.booking_requests = Counter(
            'booking_requests_total',
            'Total create-booking requests',
            ['result'],  # success / not_found / invalid_date / insufficient_seats / invalid_request / error
        )

        self.booking_duration = Histogram(
            'booking_workflow_duration_seconds',
            'Create-booking workflow duration',
            buckets=[0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0, 10.0],
        )

        self.seat_reductions = Counter(
            'showtime_seat_reductions_total',
            'Seat reduction calls against the showtime store',
            ['result'],  # success / not_found / insufficient_seats / invalid_request / error
        )

        self.seat_restorations = Counter(
            'showtime_seat_restorations_total',
            'Compensating seat restorations against the showtime store',
            ['result'],  # success / failed
        )

    def record_booking(self, *, result: str, duration: float) -> None:
        self.booking_requests.labels(result=result).inc()
        self.booking_duration.observe(duration)


metrics = BookingMetrics()
