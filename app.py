# app.py
from typing import Optional

from flask import Flask, current_app, jsonify, request

from booking import BookingService
from models import BookingError, BookingRequest, InsufficientInventory


class RequestError(ValueError):
    pass


# Helper functions
def get_service() -> BookingService:
    return current_app.extensions["booking_service"]


def int_field(data: dict, key: str, default=None, minimum: Optional[int] = None) -> int:
    value = data.get(key)
    if value is None:
        value = default
    if value is None:
        raise RequestError(f"{key} required")
    # JSON floats and numeric strings are not truncated
    if not isinstance(value, int) or isinstance(value, bool):
        raise RequestError(f"{key} must be an integer")
    if minimum is not None and value < minimum:
        raise RequestError(f"{key} must be at least {minimum}")
    return value


def text_field(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return str(value).strip()


def parse_booking(data) -> BookingRequest:
    if not isinstance(data, dict):
        raise RequestError("request body must be a JSON object")

    name = text_field(data, "customer_name")
    if not name:
        raise RequestError("customer_name required")

    guest_names = data.get("guest_names")
    if guest_names is None:
        guest_names = []
    if not isinstance(guest_names, list):
        raise RequestError("guest_names must be a list")
    guest_names = [str(g).strip() for g in guest_names]
    guest_count = int_field(data, "guest_count", default=len(guest_names), minimum=0)

    room_type = data.get("room_type")
    if room_type is None:
        raise RequestError("room_type required")

    return BookingRequest(
        customer_name=name,
        # passed through as sent; the booking service judges the selector
        room_type=room_type,
        nights=int_field(data, "nights", minimum=1),
        rooms_needed=int_field(data, "rooms_needed", default=1, minimum=1),
        guest_count=guest_count,
        guest_names=guest_names,
        phone=text_field(data, "phone"),
        national_id=text_field(data, "national_id"),
        address=text_field(data, "address"),
    )


def create_app(config: Optional[dict] = None, service: Optional[BookingService] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object("config")
    app.config.from_prefixed_env("HOTEL")
    if config:
        app.config.update(config)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # In-memory state, lives as long as the process
    app.extensions["booking_service"] = service if service is not None else BookingService()

    @app.route("/api/rooms")
    def api_rooms():
        return jsonify([r.to_dict() for r in get_service().list_rooms()])

    @app.route("/api/rooms/<int:number>")
    def api_room(number):
        room = get_service().get_room(number)
        if room is None:
            return jsonify({"error": "not found"}), 404
        return jsonify(room.to_dict())

    @app.route("/api/bookings", methods=["POST"])
    def api_book():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        try:
            booking = parse_booking(data)
        except RequestError as e:
            return jsonify({"error": str(e)}), 400

        try:
            result = get_service().book_room(booking)
        except InsufficientInventory as e:
            app.logger.warning("Booking for %s rejected: %s", booking.customer_name, e)
            return jsonify({"error": str(e), "available": e.available}), 409
        except BookingError as e:
            app.logger.warning("Booking for %s rejected: %s", booking.customer_name, e)
            return jsonify({"error": str(e)}), 400

        app.logger.info("Customer %d booked rooms %s", result.customer_id, result.rooms)
        return jsonify(result.to_dict()), 201

    @app.route("/api/customers")
    def api_customers():
        return jsonify([c.to_dict() for c in get_service().list_customers()])

    @app.route("/api/customers/<int:customer_id>")
    def api_customer(customer_id):
        customer = get_service().get_customer(customer_id)
        if customer is None:
            return jsonify({"error": "Customer not found!"}), 404
        return jsonify(customer.to_dict())

    @app.route("/api/customers/<int:customer_id>/offers")
    def api_offers(customer_id):
        offer = get_service().check_offers(customer_id)
        if offer is None:
            return jsonify({"error": "Customer not found!"}), 404
        return jsonify(offer.to_dict())

    @app.route("/api/search_customer")
    def api_search_customer():
        name = request.args.get("name", "")
        return jsonify([c.to_dict() for c in get_service().search_customers(name)])

    return app


app = create_app()

if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
