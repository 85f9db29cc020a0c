"""Entry point for the Nevorento Textual app."""

from __future__ import annotations

from nevorento.booking_app import BookingApp


def main() -> None:
    """Run the Textual application."""
    BookingApp().run()


if __name__ == "__main__":
    main()
