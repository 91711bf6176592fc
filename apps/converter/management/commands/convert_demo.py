from django.core.management.base import BaseCommand, CommandError

from apps.converter.application.demo import run_demo
from apps.converter.domain.exceptions import ConversionError


class Command(BaseCommand):
    help = 'Print a fixed set of sample currency conversions'

    def handle(self, **options):
        try:
            run_demo(stdout=self.stdout)
        except ConversionError as e:
            raise CommandError(str(e)) from e
