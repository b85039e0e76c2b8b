# cli/cli.py
"""
Command-line transport for the lead intake workflow.
"""
from __future__ import annotations

import argparse
import asyncio
import mimetypes
import os
import sys
import traceback
from pathlib import Path
from typing import Callable, Dict, List, Optional

from leadintake.core.config import settings
from leadintake.schemas.lead import LeadSubmission, PhotoAttachment
from leadintake.services.email_dispatch import RecordingEmailSender, get_email_sender
from leadintake.services.rate_limit import InMemoryRateLimiter
from leadintake.services.submission import submit_lead
from leadintake.services.validation import TOTAL_STEPS, validate_step


def _supports_color() -> bool:
    """Check if terminal supports ANSI color codes."""
    if sys.platform == "win32":
        return os.getenv("TERM") == "xterm" or os.getenv("ANSICON") is not None
    return sys.stdout.isatty()


SUPPORTS_COLOR = _supports_color()

GREEN = '\033[92m' if SUPPORTS_COLOR else ''
RED = '\033[91m' if SUPPORTS_COLOR else ''
YELLOW = '\033[93m' if SUPPORTS_COLOR else ''
BLUE = '\033[94m' if SUPPORTS_COLOR else ''
RESET = '\033[0m' if SUPPORTS_COLOR else ''


def print_success(message: str):
    print(f"{GREEN}[✓]{RESET} {message}")


def print_error(message: str):
    print(f"{RED}[✗]{RESET} {message}")


def print_warning(message: str):
    print(f"{YELLOW}[!]{RESET} {message}")


def print_info(message: str):
    print(f"{BLUE}[i]{RESET} {message}")


def load_photos(paths: List[str]) -> List[PhotoAttachment]:
    photos = []
    for raw_path in paths:
        path = Path(raw_path)
        content_type, _ = mimetypes.guess_type(path.name)
        photos.append(
            PhotoAttachment(
                filename=path.name,
                content_type=content_type or "application/octet-stream",
                content=path.read_bytes(),
            )
        )
    return photos


def _submission_from_args(args: argparse.Namespace) -> LeadSubmission:
    return LeadSubmission(
        service=args.service or "",
        postcode=args.postcode or "",
        name=args.name or "",
        phone=args.phone or "",
        email=args.email or "",
        photos=load_photos(getattr(args, "photo", None) or []),
    )


# Command functions
async def cmd_submit_lead(args: argparse.Namespace) -> int:
    """Command: Validate and dispatch a lead."""
    submission = _submission_from_args(args)
    sender = RecordingEmailSender() if args.dry_run else get_email_sender(settings)

    print_info(f"Submitting {submission.service or '?'} lead for {submission.postcode or '?'} via {sender.name}...")
    result = await submit_lead(submission, sender, settings=settings)

    if result.success:
        print_success("Lead submitted")
        if args.dry_run and sender.messages:
            message = sender.messages[0]
            print_info(f"  To: {', '.join(message.to)}")
            print_info(f"  Subject: {message.subject}")
            print_info(f"  Attachments: {len(message.attachments)}")
        return 0

    print_error(result.error or "Submission failed")
    return 1


async def cmd_validate_step(args: argparse.Namespace) -> int:
    """Command: Validate the fields of one form step."""
    submission = _submission_from_args(args)
    errors = validate_step(
        args.step,
        submission,
        max_photo_size=settings.max_photo_size_bytes,
        allowed_photo_types=settings.photo_types(),
    )

    if not errors:
        print_success(f"Step {args.step} is valid")
        return 0

    for field, error in errors.items():
        print_error(f"{field}: {error.message} ({error.code.value})")
    return 1


async def cmd_check_rate_limit(args: argparse.Namespace) -> int:
    """Command: Show how the lead rate limit treats repeated attempts from one IP."""
    limiter = InMemoryRateLimiter(
        limit=settings.lead_rate_limit_max,
        window_seconds=settings.lead_rate_limit_window_seconds,
    )
    rejected = 0
    for attempt in range(1, args.attempts + 1):
        if await limiter.allow(args.ip):
            print_success(f"Attempt {attempt}: allowed")
        else:
            rejected += 1
            print_warning(f"Attempt {attempt}: rejected")

    print_info(f"{rejected} of {args.attempts} attempts rejected (limit {limiter.limit} per {limiter.window_seconds}s)")
    return 0


COMMANDS: Dict[str, Callable] = {
    'submit-lead': cmd_submit_lead,
    'validate-step': cmd_validate_step,
    'check-rate-limit': cmd_check_rate_limit,
}


def _add_lead_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--service', help='Bathroom, Extension or Other')
    parser.add_argument('--postcode', help='UK postcode')
    parser.add_argument('--name', help='Customer name')
    parser.add_argument('--phone', help='UK phone number')
    parser.add_argument('--email', help='Customer email')
    parser.add_argument('--photo', action='append', help='Path to a photo (repeatable)')


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all commands."""
    parser = argparse.ArgumentParser(
        description='Lead intake CLI',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    submit_parser = subparsers.add_parser('submit-lead', help='Validate and send a quote request')
    _add_lead_fields(submit_parser)
    submit_parser.add_argument('--dry-run', action='store_true', help='Build the email without sending it')

    step_parser = subparsers.add_parser('validate-step', help='Validate one form step')
    step_parser.add_argument('step', type=int, choices=range(1, TOTAL_STEPS + 1), help='Step number (1-4)')
    _add_lead_fields(step_parser)

    rate_parser = subparsers.add_parser('check-rate-limit', help='Simulate repeated submissions from one IP')
    rate_parser.add_argument('ip', help='Client IP address')
    rate_parser.add_argument('--attempts', type=int, default=6, help='Number of attempts')

    return parser


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    command_func = COMMANDS.get(parsed_args.command)
    if not command_func:
        print_error(f"Unknown command: {parsed_args.command}")
        parser.print_help()
        return 1

    try:
        return asyncio.run(command_func(parsed_args))
    except KeyboardInterrupt:
        print_error("\nInterrupted by user")
        return 130
    except Exception as e:
        print_error(f"Error executing command: {str(e)}")
        if os.getenv('DEBUG'):
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
