"""Cinema ticket records kept in plain-text files, checked against related data files."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

TICKETS_FILE = "Ve.txt"
SCHEDULE_FILE = "LichChieu.txt"
SEATS_FILE = "Ghe.txt"
SERVICES_FILE = "DichVu.txt"
CUSTOMERS_FILE = "KhachHang.txt"

SHOWTIME_SEAT_LABEL = "Gio chieu+So ghe:"
SERVICE_LABEL = "Ten dich vu:"
PHONE_LABEL = "So DT:"
NO_SERVICE = "Chua chon dich vu"


class TicketError(Exception):
    """Base class for ticket operation failures."""


class InvalidShowtimeSeat(TicketError):
    """The showtime or seat is malformed or not known."""


class InvalidPhone(TicketError):
    """The customer phone number is not known."""


class InvalidService(TicketError):
    """The service name is not known."""


class DuplicateTicket(TicketError):
    """A ticket for this showtime and seat already exists."""


class TicketNotFound(TicketError):
    """No ticket matches the given showtime and seat."""


@dataclass
class Ticket:
    """One booked seat: "hh:mm-dd/mm/yyyy+SEAT", a service and a customer phone."""

    showtime_seat: str
    service: str = ""
    phone: str = ""

    def to_record(self) -> str:
        """Return the ticket as it is written to the tickets file."""
        return (
            f"Gio chieu+So ghe: {self.showtime_seat}\n"
            f"Ten dich vu: {self.service}\n"
            f"So DT: {self.phone}\n"
        )


@dataclass(frozen=True)
class SearchResult:
    """Tickets matching a query, plus free seats when the query is a booked showtime+seat."""

    matches: list[Ticket]
    free_seats: list[str] | None = None

    def __bool__(self) -> bool:
        return bool(self.matches)


def split_showtime_seat(value: str) -> tuple[str, str]:
    """Split "showtime+seat" at the first '+'."""
    showtime, plus, seat = value.partition("+")
    if not plus:
        raise InvalidShowtimeSeat(f"missing '+' in {value!r}")
    return showtime, seat


def format_ticket(ticket: Ticket) -> str:
    """Render a ticket for display, naming a missing service explicitly."""
    return Ticket(
        ticket.showtime_seat, ticket.service or NO_SERVICE, ticket.phone
    ).to_record()


def _field_value(line: str) -> str:
    colon = line.find(":")
    if colon < 0:
        return line[1:]
    return line[colon + 2:]


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return []


def _labelled_values(path: Path, label: str) -> Iterator[str]:
    for line in _read_lines(path):
        if label in line:
            yield _field_value(line)


class TicketBook:
    """The ticket list stored in a data directory."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)
        self._tickets: list[Ticket] = []
        self.load()

    def _path(self, name: str) -> Path:
        return self.directory / name

    def load(self) -> None:
        """Read tickets from the tickets file, replacing those in memory."""
        lines = iter(_read_lines(self._path(TICKETS_FILE)))
        tickets = []
        for line in lines:
            if not line:
                continue
            ticket = Ticket("")
            if SHOWTIME_SEAT_LABEL in line:
                ticket.showtime_seat = _field_value(line)
            line = next(lines, "")
            if SERVICE_LABEL in line:
                ticket.service = _field_value(line)
            line = next(lines, "")
            if PHONE_LABEL in line:
                ticket.phone = _field_value(line)
            tickets.append(ticket)
        self._tickets = tickets

    def save(self) -> None:
        """Write all tickets to the tickets file."""
        text = "".join(ticket.to_record() + "\n" for ticket in self._tickets)
        self._path(TICKETS_FILE).write_text(text, encoding="utf-8")

    def tickets(self) -> list[Ticket]:
        """Return a copy of the current tickets."""
        return [Ticket(t.showtime_seat, t.service, t.phone) for t in self._tickets]

    def showtime_exists(self, showtime: str) -> bool:
        return showtime in _labelled_values(self._path(SCHEDULE_FILE), "Gio chieu")

    def seat_exists(self, seat: str) -> bool:
        return seat in _labelled_values(self._path(SEATS_FILE), "So ghe")

    def is_valid_showtime_seat(self, showtime_seat: str) -> bool:
        try:
            showtime, seat = split_showtime_seat(showtime_seat)
        except InvalidShowtimeSeat:
            return False
        return self.showtime_exists(showtime) and self.seat_exists(seat)

    def service_exists(self, name: str) -> bool:
        return name in _labelled_values(self._path(SERVICES_FILE), "Ten dich vu")

    def customer_exists(self, phone: str) -> bool:
        return phone in _labelled_values(self._path(CUSTOMERS_FILE), "So DT")

    def free_seats(self, showtime_seat: str) -> list[str]:
        """Seats from the seats file not booked for the showtime of "showtime+seat"."""
        showtime, _ = split_showtime_seat(showtime_seat)
        booked = {
            value[value.find("+") + 1:]
            for value in _labelled_values(self._path(TICKETS_FILE), SHOWTIME_SEAT_LABEL)
            if showtime in value
        }
        return [
            seat
            for seat in _labelled_values(self._path(SEATS_FILE), "So ghe:")
            if seat not in booked
        ]

    def _check(self, showtime_seat: str, service: str, phone: str) -> None:
        if not self.is_valid_showtime_seat(showtime_seat):
            raise InvalidShowtimeSeat(showtime_seat)
        if not self.customer_exists(phone):
            raise InvalidPhone(phone)
        if not self.service_exists(service):
            raise InvalidService(service)

    def _find(self, showtime_seat: str) -> Ticket | None:
        return next(
            (t for t in self._tickets if t.showtime_seat == showtime_seat), None
        )

    def add(self, showtime_seat: str, service: str, phone: str) -> Ticket:
        """Book a new ticket and save."""
        self._check(showtime_seat, service, phone)
        if self._find(showtime_seat) is not None:
            raise DuplicateTicket(showtime_seat)
        ticket = Ticket(showtime_seat, service, phone)
        self._tickets.append(ticket)
        self.save()
        return Ticket(showtime_seat, service, phone)

    def edit(
        self, old_showtime_seat: str, new_showtime_seat: str, service: str, phone: str
    ) -> Ticket:
        """Replace the ticket booked as old_showtime_seat and save."""
        self._check(new_showtime_seat, service, phone)
        if (
            old_showtime_seat != new_showtime_seat
            and self._find(new_showtime_seat) is not None
        ):
            raise DuplicateTicket(new_showtime_seat)
        ticket = self._find(old_showtime_seat)
        if ticket is None:
            raise TicketNotFound(old_showtime_seat)
        ticket.showtime_seat = new_showtime_seat
        ticket.service = service
        ticket.phone = phone
        self.save()
        return Ticket(new_showtime_seat, service, phone)

    def remove(self, showtime_seat: str) -> Ticket:
        """Delete the first ticket booked as showtime_seat and save."""
        ticket = self._find(showtime_seat)
        if ticket is None:
            raise TicketNotFound(showtime_seat)
        self._tickets.remove(ticket)
        self.save()
        return ticket

    def search(self, query: str) -> SearchResult:
        """Find tickets whose showtime+seat, service or phone equals the query."""
        matches = [
            Ticket(t.showtime_seat, t.service, t.phone)
            for t in self._tickets
            if query in (t.showtime_seat, t.service, t.phone)
        ]
        free = None
        if "+" in query and any(t.showtime_seat == query for t in matches):
            free = self.free_seats(query)
        return SearchResult(matches, free)