"""Visitor counter maintenance command with action-based subcommands."""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from apps.visitors import provisioning
from apps.visitors.services import get_counter, get_sweeper
from apps.visitors.windows import DEFAULT_WINDOW, UnknownWindowError


class Command(BaseCommand):
    """Dispatch visitor counter actions from one Django command."""

    help = (
        "Install, uninstall, purge or query the visitor counter. "
        "Usage: python manage.py visitors <action>."
    )

    def add_arguments(self, parser):
        subparsers = parser.add_subparsers(dest="action")
        subparsers.required = True

        subparsers.add_parser(
            "install",
            help="Create the visits table and schedule the daily retention purge.",
        )
        subparsers.add_parser(
            "uninstall",
            help="Drop the visits table and remove the retention purge schedule.",
        )
        subparsers.add_parser(
            "purge",
            help="Delete visits older than the retention horizon right away.",
        )
        count_parser = subparsers.add_parser(
            "count",
            help="Print the number of recent visits.",
        )
        count_parser.add_argument(
            "--scope",
            default=DEFAULT_WINDOW,
            help=f"Counting window (default: {DEFAULT_WINDOW}).",
        )

    def handle(self, *args, **options):
        action = options["action"]
        handler = getattr(self, f"_handle_{action}", None)
        if handler is None:
            raise CommandError(f"Unsupported visitors action: {action}")
        return handler(**options)

    def _handle_install(self, **options):
        provisioning.install(verbosity=max(0, options["verbosity"] - 1))
        self.stdout.write(self.style.SUCCESS("Visitor counter installed."))

    def _handle_uninstall(self, **options):
        provisioning.uninstall(verbosity=max(0, options["verbosity"] - 1))
        self.stdout.write(self.style.SUCCESS("Visitor counter uninstalled."))

    def _handle_purge(self, **options):
        deleted = get_sweeper().purge()
        self.stdout.write(f"Purged {deleted} visit(s).")

    def _handle_count(self, **options):
        try:
            value = get_counter().formatted_count(options["scope"])
        except UnknownWindowError as exc:
            raise CommandError(str(exc)) from exc
        self.stdout.write(value)
