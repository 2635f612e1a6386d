"""Management command to list the auto-approval checks in evaluation order."""

from django.core.management.base import BaseCommand

from approvals.autoreview.checks import get_all_checks


class Command(BaseCommand):
    help = "List the auto-approval checks in the order they run"

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS("\nAuto-approval Checks:\n"))

        for check in get_all_checks():
            stage = "commits" if check["requires_commits"] else "metadata"
            line = f"  {check['priority']:2d}. [{stage:8s}] {check['id']:20s} - {check['name']}"
            self.stdout.write(line)

        self.stdout.write(
            self.style.WARNING(
                "\nThe first check that fails decides the outcome. The draft, fork and "
                "author checks can be turned off with the skip-drafts, skip-forks and "
                "require-pr-author-is-bot inputs.\n"
            )
        )
