"""
Run: python manage.py healthcheck

Lists employees once against EMPLOYEE_API_BASE_URL and makes sure every
page of the site still has a route. Exits non-zero when the backend is
unreachable or a route is missing.
"""

import time
import logging

from django.core.management.base import BaseCommand, CommandError
from django.urls import reverse, NoReverseMatch

from apps.employees.services import EmployeeService, EmployeeServiceError
from config.constants import API_HEALTH_SLOW_MS

logger = logging.getLogger('diagnostics')

# (url name, kwargs) for every page and action the site serves
SITE_ROUTES = [
    ('home', {}),
    ('employee-list', {}),
    ('employee-add', {}),
    ('employee-edit', {'employee_id': 1}),
    ('employee-delete', {'employee_id': 1}),
]


class Command(BaseCommand):
    help = 'Check that the employee API answers and that every site route resolves.'

    def handle(self, *args, **options):
        problems = [p for p in (self.check_employee_api(), self.check_routes()) if p]
        if problems:
            logger.error(f'Health check failed: {"; ".join(problems)}')
            raise CommandError('; '.join(problems))
        logger.info('Health check: employee API and routes OK')
        self.stdout.write(self.style.SUCCESS('EMS is healthy.'))

    def check_employee_api(self):
        start = time.time()
        with EmployeeService() as service:
            try:
                employees = service.list_employees()
            except EmployeeServiceError as e:
                self.stdout.write(self.style.ERROR(f'Employee API at {service.base_url}: {e}'))
                return f'employee API unreachable ({e})'
        duration_ms = (time.time() - start) * 1000

        line = f'Employee API at {service.base_url}: {len(employees)} employee(s) in {duration_ms:.0f}ms'
        if duration_ms > API_HEALTH_SLOW_MS:
            logger.warning(f'Slow employee API: {duration_ms:.0f}ms')
            self.stdout.write(self.style.WARNING(f'{line} (slow)'))
        else:
            self.stdout.write(self.style.SUCCESS(line))
        return None

    def check_routes(self):
        missing = []
        for name, kwargs in SITE_ROUTES:
            try:
                reverse(name, kwargs=kwargs)
            except NoReverseMatch:
                missing.append(name)
        if missing:
            self.stdout.write(self.style.ERROR(f'Unrouted pages: {", ".join(missing)}'))
            return f'missing routes: {", ".join(missing)}'
        self.stdout.write(self.style.SUCCESS(f'{len(SITE_ROUTES)} routes resolve'))
        return None
