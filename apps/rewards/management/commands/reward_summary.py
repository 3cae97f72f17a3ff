import json
from datetime import date

from django.core.management.base import BaseCommand, CommandError

from apps.common.exceptions import RewardsError
from apps.rewards.serializers import RewardSummarySerializer
from apps.rewards.services import RewardService


def _parse_date(value):
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise CommandError(f"Invalid date {value!r}. Please use YYYY-MM-DD format.")


class Command(BaseCommand):
    help = 'Print reward point summaries as JSON'

    def add_arguments(self, parser):
        parser.add_argument('customer_id', nargs='?', help='Summarize one customer (requires --start and --end)')
        parser.add_argument('--start', help='First day of the window, YYYY-MM-DD')
        parser.add_argument('--end', help='Last day of the window, YYYY-MM-DD')
        parser.add_argument(
            '--with-multiplier',
            action='store_true',
            help='Apply the external rule service multipliers (best effort)'
        )

    def handle(self, *args, **options):
        customer_id = options['customer_id']

        if customer_id is None:
            if options['with_multiplier']:
                raise CommandError('--with-multiplier needs a customer id')
            summaries = RewardService.get_all_summaries()
            data = RewardSummarySerializer(summaries, many=True).data
        else:
            if not options['start'] or not options['end']:
                raise CommandError('--start and --end are required when a customer id is given')
            start_date = _parse_date(options['start'])
            end_date = _parse_date(options['end'])

            try:
                if options['with_multiplier']:
                    summary = RewardService.get_customer_summary_with_external_multiplier(
                        customer_id, start_date, end_date
                    )
                else:
                    summary = RewardService.get_customer_summary(customer_id, start_date, end_date)
            except RewardsError as e:
                raise CommandError(e.message) from e

            data = RewardSummarySerializer(summary).data

        self.stdout.write(json.dumps(data, indent=2, default=str))
