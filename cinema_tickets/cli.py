"""Interactive ticket management menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from .tickets import (
    DuplicateTicket,
    InvalidPhone,
    InvalidService,
    InvalidShowtimeSeat,
    TicketBook,
    TicketError,
    TicketNotFound,
    format_ticket,
)

MENU = (
    "Quan ly ve\n"
    "1. Tim ve\n2. Them ve\n3. Xoa ve\n4. Sua ve\n5. Xem ve\nNhap bat ky de quay lai\n"
    "Chon chuc nang: "
)

_ADD_ERRORS = {
    InvalidShowtimeSeat: "Gio chieu hoac so ghe khong hop le!",
    InvalidPhone: "So dien thoai khach hang khong hop le!",
    InvalidService: "Ten dich vu khong hop le!",
    DuplicateTicket: "Ve da ton tai!",
}

_EDIT_ERRORS = {
    InvalidShowtimeSeat: "Gio chieu hoac so ghe moi khong hop le!",
    InvalidPhone: "So dien thoai khach hang moi khong hop le!",
    InvalidService: "Ten dich vu moi khong hop le!",
    DuplicateTicket: "Ve da ton tai voi gio chieu+so ghe moi!",
    TicketNotFound: "Khong tim thay ve can sua!",
}

_REMOVE_ERRORS = {TicketNotFound: "Khong tim thay ve!"}


def _message(error: TicketError, messages: dict[type, str]) -> str:
    for kind, text in messages.items():
        if isinstance(error, kind):
            return text
    raise error


def _free_seats_line(seats: list[str] | None) -> str:
    if seats is None:
        return "\n"
    listed = "".join(f"{seat} " for seat in seats) or "Da dat het."
    return f"Danh sach ghe trong: {listed}\n"


def run_menu(
    book: TicketBook, read_line: Callable[[], str], write: Callable[[str], object]
) -> None:
    """Show the menu once and carry out the chosen action."""

    def ask(prompt: str) -> str:
        write(prompt)
        return read_line()

    write(MENU)
    choice = read_line()

    if choice == "1":
        query = ask("Nhap (gio chieu+so ve/ten dich vu/so DT) de tim: ")
        result = book.search(query)
        for ticket in result.matches:
            if ticket.showtime_seat == query:
                write(_free_seats_line(result.free_seats))
            write(format_ticket(ticket) + "\n")
        if not result:
            write("Khong tim thay ve.\n\n")
    elif choice == "2":
        key = ask("Nhap gio chieu+so ghe (hh:mm-dd/mm/yyyy+S): ")
        service = ask("Nhap ten dich vu: ")
        phone = ask("Nhap so DT: ")
        try:
            book.add(key, service, phone)
        except TicketError as error:
            write(_message(error, _ADD_ERRORS) + "\n\n")
        else:
            write("Da them ve thanh cong!\n\n")
    elif choice == "3":
        key = ask("Nhap gio chieu+so ghe muon xoa (hh:mm-dd/mm/yyyy+S): ")
        try:
            book.remove(key)
        except TicketError as error:
            write(_message(error, _REMOVE_ERRORS) + "\n\n")
        else:
            write("Da xoa ve thanh cong!\n\n")
    elif choice == "4":
        old_key = ask("Nhap gio chieu+so ghe cu: ")
        new_key = ask("Nhap gio chieu+so ghe moi: ")
        service = ask("Nhap ten dich vu moi: ")
        phone = ask("Nhap so DT moi: ")
        try:
            book.edit(old_key, new_key, service, phone)
        except TicketError as error:
            write(_message(error, _EDIT_ERRORS) + "\n\n")
        else:
            write("Da sua ve thanh cong!\n\n")
    elif choice == "5":
        tickets = book.tickets()
        if not tickets:
            write("Danh sach ve rong!\n\n")
        for ticket in tickets:
            write(ticket.to_record() + "\n")
    else:
        write("\n")


def main(argv: list[str] | None = None) -> int:
    """Run the ticket menu against the data files in a directory."""
    parser = argparse.ArgumentParser(description="Manage cinema tickets.")
    parser.add_argument("--data-dir", default=".", help="directory holding the data files")
    args = parser.parse_args(argv)

    def read_line() -> str:
        return sys.stdin.readline().rstrip("\r\n")

    run_menu(TicketBook(args.data_dir), read_line, sys.stdout.write)
    return 0


if __name__ == "__main__":
    sys.exit(main())