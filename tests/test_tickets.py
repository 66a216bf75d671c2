import pytest

from cinema_tickets.tickets import (
    DuplicateTicket,
    InvalidPhone,
    InvalidService,
    InvalidShowtimeSeat,
    Ticket,
    TicketBook,
    TicketNotFound,
    format_ticket,
    split_showtime_seat,
)

SHOW = "10:30-01/01/2024"
PHONE = "100"


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "LichChieu.txt").write_text(
        f"Gio chieu    : {SHOW}\nTen phim    : Film\nGia ve      : 50000\n\n"
    )
    (tmp_path / "Ghe.txt").write_text("So ghe: A1\nSo ghe: A2\nSo ghe: A3\n")
    (tmp_path / "DichVu.txt").write_text("Ten dich vu: Popcorn\nTen dich vu: Soda\n")
    (tmp_path / "KhachHang.txt").write_text(f"So DT: {PHONE}\nSo DT: 200\n")
    return tmp_path


@pytest.fixture
def book(data_dir):
    return TicketBook(data_dir)


def test_split_showtime_seat():
    assert split_showtime_seat(SHOW + "+A1") == (SHOW, "A1")


def test_split_showtime_seat_requires_plus():
    with pytest.raises(InvalidShowtimeSeat):
        split_showtime_seat(SHOW)


def test_add_writes_record(book, data_dir):
    book.add(SHOW + "+A1", "Popcorn", PHONE)
    text = (data_dir / "Ve.txt").read_text()
    assert text == f"Gio chieu+So ghe: {SHOW}+A1\nTen dich vu: Popcorn\nSo DT: {PHONE}\n\n"


def test_round_trip(book, data_dir):
    book.add(SHOW + "+A1", "Popcorn", PHONE)
    book.add(SHOW + "+A2", "Soda", "200")
    assert TicketBook(data_dir).tickets() == book.tickets()


@pytest.mark.parametrize(
    "key, service, phone, error",
    [
        (SHOW + "+Z9", "Popcorn", PHONE, InvalidShowtimeSeat),
        ("11:00-01/01/2024+A1", "Popcorn", PHONE, InvalidShowtimeSeat),
        (SHOW + "A1", "Popcorn", PHONE, InvalidShowtimeSeat),
        (SHOW + "+A1", "Popcorn", "999", InvalidPhone),
        (SHOW + "+A1", "Candy", PHONE, InvalidService),
        (SHOW + "+Z9", "Candy", "999", InvalidShowtimeSeat),
    ],
)
def test_add_rejects_invalid(book, key, service, phone, error):
    with pytest.raises(error):
        book.add(key, service, phone)
    assert book.tickets() == []


def test_add_duplicate(book):
    book.add(SHOW + "+A1", "Popcorn", PHONE)
    with pytest.raises(DuplicateTicket):
        book.add(SHOW + "+A1", "Soda", "200")
    assert len(book.tickets()) == 1


def test_edit_same_key(book, data_dir):
    book.add(SHOW + "+A1", "Popcorn", PHONE)
    book.edit(SHOW + "+A1", SHOW + "+A1", "Soda", "200")
    assert TicketBook(data_dir).tickets() == [Ticket(SHOW + "+A1", "Soda", "200")]


def test_edit_to_existing_key(book):
    book.add(SHOW + "+A1", "Popcorn", PHONE)
    book.add(SHOW + "+A2", "Popcorn", PHONE)
    with pytest.raises(DuplicateTicket):
        book.edit(SHOW + "+A1", SHOW + "+A2", "Soda", PHONE)


def test_edit_missing(book):
    with pytest.raises(TicketNotFound):
        book.edit(SHOW + "+A1", SHOW + "+A2", "Soda", PHONE)


def test_edit_invalid_service(book):
    book.add(SHOW + "+A1", "Popcorn", PHONE)
    with pytest.raises(InvalidService):
        book.edit(SHOW + "+A1", SHOW + "+A1", "Candy", PHONE)


def test_remove(book, data_dir):
    book.add(SHOW + "+A1", "Popcorn", PHONE)
    removed = book.remove(SHOW + "+A1")
    assert removed.showtime_seat == SHOW + "+A1"
    assert TicketBook(data_dir).tickets() == []


def test_remove_missing(book):
    with pytest.raises(TicketNotFound):
        book.remove(SHOW + "+A1")


def test_free_seats(book):
    assert book.free_seats(SHOW + "+A1") == ["A1", "A2", "A3"]
    book.add(SHOW + "+A1", "Popcorn", PHONE)
    assert book.free_seats(SHOW + "+A1") == ["A2", "A3"]


def test_free_seats_all_booked(book):
    for seat in ("A1", "A2", "A3"):
        book.add(f"{SHOW}+{seat}", "Popcorn", PHONE)
    assert book.free_seats(SHOW + "+A1") == []


def test_free_seats_requires_plus(book):
    with pytest.raises(InvalidShowtimeSeat):
        book.free_seats(SHOW)


def test_search_by_key_includes_free_seats(book):
    book.add(SHOW + "+A1", "Popcorn", PHONE)
    result = book.search(SHOW + "+A1")
    assert result.matches == [Ticket(SHOW + "+A1", "Popcorn", PHONE)]
    assert result.free_seats == ["A2", "A3"]


def test_search_by_phone(book):
    book.add(SHOW + "+A1", "Popcorn", PHONE)
    book.add(SHOW + "+A2", "Soda", PHONE)
    book.add(SHOW + "+A3", "Soda", "200")
    result = book.search(PHONE)
    assert [t.showtime_seat for t in result.matches] == [SHOW + "+A1", SHOW + "+A2"]
    assert result.free_seats is None


def test_search_no_match(book):
    result = book.search("nothing")
    assert not result
    assert result.matches == []


def test_format_ticket_placeholder():
    text = format_ticket(Ticket(SHOW + "+A1", "", PHONE))
    assert "Ten dich vu: Chua chon dich vu\n" in text


def test_format_ticket_keeps_service():
    text = format_ticket(Ticket(SHOW + "+A1", "Popcorn", PHONE))
    assert text.splitlines() == [
        f"Gio chieu+So ghe: {SHOW}+A1",
        "Ten dich vu: Popcorn",
        f"So DT: {PHONE}",
    ]


def test_load_partial_record(data_dir):
    (data_dir / "Ve.txt").write_text(f"Gio chieu+So ghe: {SHOW}+A1\nSo DT: {PHONE}\n")
    book = TicketBook(data_dir)
    assert book.tickets() == [Ticket(SHOW + "+A1", "", "")]


def test_missing_data_files(tmp_path):
    book = TicketBook(tmp_path)
    assert book.tickets() == []
    assert not book.showtime_exists(SHOW)
    assert not book.customer_exists(PHONE)
    assert not book.is_valid_showtime_seat(SHOW + "+A1")