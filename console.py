# console.py
import logging
from typing import List

import click

from booking import BookingService
from models import BookingError, BookingRequest, Customer, Room

MENU = """
1. Display all rooms
2. Book a room
3. Display all customers
4. Check offers for a customer by ID
5. Exit"""


def format_room(room: Room) -> str:
    return "Room {} | {} | Rate: ₹{:.2f} | Available: {}".format(
        room.number, room.fare_class.label, room.rate, "Yes" if room.available else "No"
    )


def format_customer(customer: Customer) -> List[str]:
    return [
        f"Customer ID: {customer.id}, Name: {customer.name}, Phone: {customer.phone}, "
        f"National ID: {customer.national_id}, Address: {customer.address}, "
        f"Loyalty Points: {customer.loyalty_points}",
        f"Booked on: {customer.booking_date}",
        "Guests: " + " ".join(customer.guest_names),
    ]


def prompt_booking() -> BookingRequest:
    name = click.prompt("Enter customer name")
    # range is checked when booking, after all details are collected
    room_type = click.prompt("Enter room type (0 for Standard, 1 for Deluxe)", type=int)
    guests = click.prompt("Enter number of guests", type=click.IntRange(min=0))
    if guests > 2:
        rooms_needed = click.prompt("Enter number of rooms you want to book", type=click.IntRange(min=1))
    else:
        rooms_needed = 1
    nights = click.prompt("Enter number of nights", type=click.IntRange(min=1))
    phone = click.prompt("Enter phone number", default="", show_default=False)
    national_id = click.prompt("Enter national ID number", default="", show_default=False)
    address = click.prompt("Enter address", default="", show_default=False)
    guest_names = [
        click.prompt(f"Enter name of guest {i + 1}", default="", show_default=False)
        for i in range(guests)
    ]
    return BookingRequest(
        customer_name=name,
        room_type=room_type,
        nights=nights,
        rooms_needed=rooms_needed,
        guest_count=guests,
        guest_names=guest_names,
        phone=phone,
        national_id=national_id,
        address=address,
    )


def book(service: BookingService):
    booking = prompt_booking()
    try:
        result = service.book_room(booking)
    except BookingError as e:
        click.echo(f"Error: {e}", err=True)
        return
    if result.new_customer:
        click.echo(f"Customer ID assigned: {result.customer_id}")
    click.echo(
        f"Room(s) booked successfully for {booking.customer_name}. "
        f"Total bill: ₹{result.total_bill:.2f}"
    )


def show_rooms(service: BookingService):
    click.echo("Room details:")
    for room in service.list_rooms():
        click.echo(format_room(room))


def show_customers(service: BookingService):
    click.echo("Customer details:")
    for customer in service.list_customers():
        for line in format_customer(customer):
            click.echo(line)


def show_offers(service: BookingService):
    customer_id = click.prompt("Enter customer ID to check offers", type=int)
    offer = service.check_offers(customer_id)
    if offer is None:
        click.echo("Customer not found!")
        return
    click.echo(f"Offers for {offer.name}:")
    click.echo(offer.message)


ACTIONS = {
    "1": show_rooms,
    "2": book,
    "3": show_customers,
    "4": show_offers,
}


def run_menu(service: BookingService):
    while True:
        click.echo(MENU)
        choice = click.prompt("Enter your choice").strip()
        if choice == "5":
            click.echo("Exiting the system.")
            return
        action = ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid choice. Please select a valid option.")
            continue
        action(service)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
def main(log_level: str) -> None:
    """Hotel booking simulator."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@main.command()
def console() -> None:
    """Run the interactive booking menu."""
    run_menu(BookingService())


@main.command()
@click.option("--host", default=None, help="Defaults to HOST from config.")
@click.option("--port", default=None, type=int, help="Defaults to PORT from config.")
@click.option("--debug", is_flag=True)
def serve(host, port, debug) -> None:
    """Run the JSON API with Flask's development server."""
    from app import app

    app.run(
        host=host or app.config["HOST"],
        port=port or app.config["PORT"],
        debug=debug or app.config["DEBUG"],
    )


if __name__ == "__main__":
    main()
