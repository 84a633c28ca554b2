#!/usr/bin/env python3
"""
Event management CLI for Eventmi.
Run this script to prepare the database, inspect events or start the server.

Usage:
    python manage_events.py init
    python manage_events.py seed [--force]
    python manage_events.py list
    python manage_events.py add <name> <start> <end> <place>
    python manage_events.py delete <id> [--yes]
    python manage_events.py serve

Dates use the form format, e.g. "03/20/2024 09:10 AM".
"""

import sys
import os
from datetime import datetime

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from pydantic import ValidationError

from eventmi import config
from eventmi.database import init_db, get_db
from eventmi.forms import EventFormModel, form_errors, format_form_datetime
from eventmi.infrastructure.repositories import EventRepository

SAMPLE_EVENTS = [
    ("Spring Jazz Night", datetime(2024, 3, 20, 19, 0), datetime(2024, 3, 20, 23, 0), "Plovdiv"),
    ("Open Air Cinema", datetime(2024, 6, 14, 21, 30), datetime(2024, 6, 15, 0, 30), "Sofia"),
    ("Wine Tasting", datetime(2024, 9, 7, 17, 0), datetime(2024, 9, 7, 20, 0), "Melnik"),
    ("Tech Meetup", datetime(2024, 10, 3, 18, 30), datetime(2024, 10, 3, 21, 0), "Varna"),
    ("Christmas Market", datetime(2024, 12, 1, 10, 0), datetime(2024, 12, 24, 20, 0), "Plovdiv"),
    ("Winter Concert", datetime(2025, 1, 18, 19, 0), datetime(2025, 1, 18, 21, 30), "Sofia"),
]


def print_usage():
    print(__doc__)


def get_repository() -> EventRepository:
    return EventRepository(get_db())


def cmd_init(args):
    # Schema is created in main() before every command
    print(f"Database ready at {config.DATABASE_PATH}")
    return 0


def cmd_seed(args):
    repo = get_repository()
    force = "--force" in args

    existing = repo.count()
    if existing and not force:
        print(f"Database already has {existing} event(s); use --force to add samples anyway")
        return 0

    for name, start, end, place in SAMPLE_EVENTS:
        event_id = repo.create(name, start, end, place)
        print(f"Added event {event_id}: {name}")
    return 0


def cmd_list(args):
    events = get_repository().list_all()
    if not events:
        print("No events found. Create some with: python manage_events.py seed")
        return 0

    print(f"{'ID':<5} {'Name':<30} {'Start':<20} {'End':<20} {'Place'}")
    print("-" * 100)
    for event in events:
        print(
            f"{event['id']:<5} {event['name']:<30} "
            f"{format_form_datetime(event['start_date']):<20} "
            f"{format_form_datetime(event['end_date']):<20} {event['place']}"
        )
    return 0


def cmd_add(args):
    if len(args) < 4:
        print("Error: add requires <name> <start> <end> <place>")
        print("Example: python manage_events.py add \"New Event\" \"03/20/2024 09:10 AM\" \"03/21/2024 09:10 AM\" Plovdiv")
        return 1

    try:
        form = EventFormModel.from_form(
            {"Name": args[0], "Start": args[1], "End": args[2], "Place": args[3]}
        )
    except ValidationError as e:
        for field, message in form_errors(e).items():
            print(f"Error: {field or 'Event'}: {message}")
        return 1

    event_id = get_repository().create(form.name, form.start, form.end, form.place)
    print(f"Event '{form.name}' created successfully (ID: {event_id})")
    return 0


def cmd_delete(args):
    if len(args) < 1:
        print("Error: delete requires <id>")
        return 1

    try:
        event_id = int(args[0])
    except ValueError:
        event_id = None
    if event_id is None or not 1 <= event_id <= config.MAX_EVENT_ID:
        print(f"Error: '{args[0]}' is not an event ID")
        return 1

    repo = get_repository()
    event = repo.get_by_id(event_id)
    if not event:
        print(f"Error: Event {event_id} not found")
        return 1

    # Confirm deletion
    if "--yes" not in args:
        confirm = input(f"Delete event {event_id} ({event['name']})? [y/N]: ")
        if confirm.lower() != 'y':
            print("Cancelled")
            return 0

    repo.delete(event_id)
    print(f"Event {event_id} deleted")
    return 0


def cmd_serve(args):
    import uvicorn

    uvicorn.run("eventmi.main:app", host=config.HOST, port=config.PORT)
    return 0


def main():
    if len(sys.argv) < 2:
        print_usage()
        return 1

    # Initialize database
    init_db()

    command = sys.argv[1].lower()
    args = sys.argv[2:]

    commands = {
        'init': cmd_init,
        'seed': cmd_seed,
        'list': cmd_list,
        'add': cmd_add,
        'delete': cmd_delete,
        'serve': cmd_serve,
        'help': lambda _: (print_usage(), 0)[1],
    }

    if command not in commands:
        print(f"Unknown command: {command}")
        print_usage()
        return 1

    return commands[command](args)


if __name__ == "__main__":
    sys.exit(main())
