# cinema-tickets

A small ticket book for a cinema. It keeps its tickets in plain text files in one
directory. Every new or changed ticket is checked against the showtimes, seats,
services and customers listed in the other files there.

## Data files

All files live in the directory the book is opened on:

- `Ve.txt` holds the tickets. Each ticket is three lines followed by a blank line:

  ```
  Gio chieu+So ghe: 19:30-24/12/2024+A1
  Ten dich vu: Popcorn
  So DT: 0001
  ```

- `LichChieu.txt` lists showtimes on lines containing `Gio chieu: hh:mm-dd/mm/yyyy`.
- `Ghe.txt` lists seats on lines containing `So ghe: <seat>`.
- `DichVu.txt` lists services on lines containing `Ten dich vu: <name>`.
- `KhachHang.txt` lists customers on lines containing `So DT: <phone>`.

A value is whatever follows the first `": "` on its line. A missing file counts
as empty.

A ticket is keyed by its showtime and seat joined with `+`, for example
`19:30-24/12/2024+A1`.

## Command line

```
cinema-tickets [--data-dir DIR]
```

This opens the ticket book in `DIR` (the current directory by default), shows the
menu once, carries out the chosen action and exits:

1. search tickets by showtime+seat, service or phone; a search for a booked
   showtime+seat also prints the seats still free for that showtime
2. add a ticket
3. remove a ticket
4. edit a ticket
5. list all tickets

Any other answer returns without doing anything.

## Library use

```python
from cinema_tickets.tickets import TicketBook, DuplicateTicket, format_ticket

book = TicketBook("data")
try:
    book.add("19:30-24/12/2024+A1", "Popcorn", "0001")
except DuplicateTicket:
    print("That seat is already taken.")

for ticket in book.tickets():
    print(format_ticket(ticket))

result = book.search("Popcorn")
print(result.matches)       # tickets whose showtime+seat, service or phone equals the query
print(result.free_seats)    # set only when the query is a booked showtime+seat

print(book.free_seats("19:30-24/12/2024+A1"))
```

`TicketBook` also offers `showtime_exists`, `seat_exists`,
`is_valid_showtime_seat`, `service_exists` and `customer_exists`, and
`load`/`save` to re-read or rewrite `Ve.txt`. `split_showtime_seat` splits a key
at its first `+`.

`add`, `edit` and `remove` raise a subclass of `TicketError`
(`InvalidShowtimeSeat`, `InvalidPhone`, `InvalidService`, `DuplicateTicket` or
`TicketNotFound`) when a change cannot be made. Every successful change is
written back to `Ve.txt` straight away.

## What it does not do

The showtime, seat, service and customer files are only read. This package has
no way to create or edit showtimes, seats, services or customers; those files
have to be prepared by other means.

## Tests

```
pip install -e ".[test]"
pytest
```