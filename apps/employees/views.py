import logging

from django.shortcuts import render, redirect
from django.views import View
from django.views.decorators.http import require_POST
from django.utils.decorators import method_decorator

from .forms import EmployeeForm, CreateMode, EditMode, form_mode
from .services import EmployeeService, EmployeeServiceError

logger = logging.getLogger("apps.employees")


class EmployeeListView(View):
    """Fetch the whole collection on every visit and render it as a table."""
    template_name = 'employees/list_employee.html'

    def get(self, request):
        employees = []
        try:
            with EmployeeService() as service:
                employees = service.list_employees()
        except EmployeeServiceError as e:
            logger.error(f"Could not load employees: {e}")
        return render(request, self.template_name, {'employees': employees})


@method_decorator(require_POST, name='dispatch')
class EmployeeDeleteView(View):
    def post(self, request, employee_id):
        try:
            with EmployeeService() as service:
                service.delete_employee(employee_id)
        except EmployeeServiceError as e:
            logger.error(f"Could not delete employee {employee_id}: {e}")
        return redirect('employee-list')


class EmployeeFormView(View):
    """Add or edit one employee. The mode comes from the presence of employee_id in the URL."""
    template_name = 'employees/employee_form.html'

    def _render(self, request, form, mode):
        return render(request, self.template_name, {
            'form': form,
            'mode': mode,
            'form_title': mode.heading,
        })

    def get(self, request, employee_id=None):
        mode = form_mode(employee_id)
        form = EmployeeForm()
        if isinstance(mode, EditMode):
            try:
                with EmployeeService() as service:
                    employee = service.get_employee(mode.employee_id)
                form = EmployeeForm.from_employee(employee)
            except EmployeeServiceError as e:
                logger.error(f"Could not load employee {mode.employee_id}: {e}")
        return self._render(request, form, mode)

    def post(self, request, employee_id=None):
        mode = form_mode(employee_id)
        form = EmployeeForm(request.POST)
        if not form.is_valid():
            return self._render(request, form, mode)

        employee = form.to_employee()
        logger.info(f"Submitting employee: {employee.to_api()}")
        try:
            with EmployeeService() as service:
                if isinstance(mode, CreateMode):
                    saved = service.create_employee(employee)
                else:
                    saved = service.update_employee(mode.employee_id, employee)
        except EmployeeServiceError as e:
            logger.error(f"Could not save employee ({type(mode).__name__}): {e}")
            return self._render(request, form, mode)

        logger.info(f"Saved employee: {saved.to_api()}")
        return redirect('employee-list')
