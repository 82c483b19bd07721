"""Tests for the Employee record (payroll_kernel/domain/employee.py)."""

from decimal import Decimal

import pytest

from payroll_kernel.domain.employee import Employee
from payroll_kernel.exceptions import InvalidEmployeeError, InvalidSalaryError


class TestConstruction:

    def test_defaults_to_unpaid(self):
        employee = Employee("1", 1000)
        assert employee.id == "1"
        assert employee.salary == Decimal("1000")
        assert employee.paid is False

    def test_salary_is_decimal(self):
        assert isinstance(Employee("1", 1000).salary, Decimal)
        assert Employee("1", "1234.56").salary == Decimal("1234.56")

    def test_float_salary_uses_its_repr(self):
        assert Employee("1", 0.1).salary == Decimal("0.1")

    def test_zero_salary_allowed(self):
        assert Employee("1", 0).salary == Decimal("0")

    def test_paid_can_be_given(self):
        assert Employee("1", 10, paid=True).paid is True

    @pytest.mark.parametrize("salary", [-1, "-0.01", "NaN", "Infinity", "abc", None, True])
    def test_invalid_salary_rejected(self, salary):
        with pytest.raises(InvalidSalaryError) as exc_info:
            Employee("9", salary)
        assert exc_info.value.employee_id == "9"
        assert exc_info.value.code == "INVALID_SALARY"

    @pytest.mark.parametrize("employee_id", ["", None, 7])
    def test_invalid_id_rejected(self, employee_id):
        with pytest.raises(InvalidEmployeeError):
            Employee(employee_id, 100)


class TestImmutability:

    def test_id_is_read_only(self):
        employee = Employee("1", 1000)
        with pytest.raises(AttributeError):
            employee.id = "2"

    def test_salary_is_read_only(self):
        employee = Employee("1", 1000)
        with pytest.raises(AttributeError):
            employee.salary = Decimal("5")

    def test_paid_is_mutable(self):
        employee = Employee("1", 1000)
        employee.mark_paid()
        assert employee.paid is True
        employee.mark_unpaid()
        assert employee.paid is False


class TestIdentity:

    def test_equal_by_id_only(self):
        assert Employee("1", 1000) == Employee("1", 1200, paid=True)
        assert Employee("1", 1000) != Employee("2", 1000)

    def test_hash_by_id(self):
        assert len({Employee("1", 1000), Employee("1", 5), Employee("2", 5)}) == 2

    def test_not_equal_to_other_types(self):
        assert Employee("1", 1000) != "1"

    def test_repr_shows_fields(self):
        assert repr(Employee("1", "10.50")) == "Employee(id='1', salary=10.50, paid=False)"
