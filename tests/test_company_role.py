"""
Tests for company role rules, rate forwarding and the role service.
"""

from datetime import timedelta

import pytest

from equity_payroll.core.exceptions import MissingRateError, NotFoundError, RecordInvalid
from equity_payroll.models import CompanyRole, PayRateType
from equity_payroll.schemas.company_role import (
    CompanyRoleCreate,
    CompanyRoleRateCreate,
    CompanyRoleUpdate,
)
from equity_payroll.schemas.contractor import ContractorEnd
from equity_payroll.services.company_role_rules import (
    RoleRuleViolation,
    check_role_deletion,
    check_trial_eligibility,
)
from equity_payroll.services.company_role_service import CompanyRoleService
from equity_payroll.services.contractor_service import ContractorService
from equity_payroll.utils.dates import utcnow
from tests.factories import create_company, create_company_role, create_contractor


def build_role(pay_rate_type=PayRateType.HOURLY, **attrs) -> CompanyRole:
    role = CompanyRole(company_id=1, name="Designer", **attrs)
    role.assign_rate(pay_rate_type, 5000, trial_pay_rate_in_subunits=2500)
    return role


class TestRateForwarding:
    def test_accessors_read_the_current_rate(self):
        role = build_role(PayRateType.PROJECT_BASED)

        assert role.pay_rate_in_subunits == 5000
        assert role.pay_rate_type == PayRateType.PROJECT_BASED
        assert role.trial_pay_rate_in_subunits == 2500
        assert role.is_project_based is True
        assert role.is_hourly is False
        assert role.is_salary is False

    def test_newest_rate_is_current(self):
        role = build_role(PayRateType.HOURLY)
        role.assign_rate(PayRateType.SALARY, 900000)

        assert role.is_salary is True
        assert role.pay_rate_in_subunits == 900000
        assert len(role.rates) == 2

    def test_missing_rate_is_fatal(self):
        role = CompanyRole(company_id=1, name="No rate")

        with pytest.raises(MissingRateError):
            role.pay_rate_type

    def test_expense_card_has_limit(self):
        role = build_role(expense_card_spending_limit_cents=100_00)
        assert role.expense_card_has_limit is True

        role.expense_card_spending_limit_cents = 0
        assert role.expense_card_has_limit is False


class TestRoleRules:
    def test_trials_allowed_for_hourly_roles(self):
        role = build_role(PayRateType.HOURLY, trial_enabled=True)
        assert check_trial_eligibility(role) is None

    @pytest.mark.parametrize("pay_rate_type", [PayRateType.PROJECT_BASED, PayRateType.SALARY])
    def test_trials_rejected_for_non_hourly_roles(self, pay_rate_type):
        role = build_role(pay_rate_type, trial_enabled=True)
        assert check_trial_eligibility(role) == RoleRuleViolation.TRIAL_REQUIRES_HOURLY

    def test_deletion_blocked_by_active_contractors(self):
        role = build_role(deleted_at=utcnow())

        assert check_role_deletion(role, active_contractor_count=1) == RoleRuleViolation.ACTIVE_CONTRACTORS
        assert check_role_deletion(role, active_contractor_count=0) is None

    def test_live_role_is_never_blocked(self):
        role = build_role()
        assert check_role_deletion(role, active_contractor_count=3) is None


@pytest.mark.asyncio
class TestCompanyRoleService:
    async def test_create_role_with_rate(self, test_db_session):
        company = await create_company(test_db_session)
        service = CompanyRoleService(test_db_session)

        role = await service.create_role(
            CompanyRoleCreate(
                company_id=company.id,
                name="Engineer",
                trial_enabled=True,
                rate=CompanyRoleRateCreate(pay_rate_type=PayRateType.HOURLY, pay_rate_in_subunits=6000),
            )
        )

        assert role.trial_enabled is True
        assert role.pay_rate_type == PayRateType.HOURLY
        assert role.pay_rate_in_subunits == 6000
        assert role.rate.id is not None

    async def test_create_role_for_unknown_company(self, test_db_session):
        service = CompanyRoleService(test_db_session)

        with pytest.raises(NotFoundError):
            await service.create_role(
                CompanyRoleCreate(
                    company_id=999,
                    name="Engineer",
                    rate=CompanyRoleRateCreate(pay_rate_in_subunits=6000),
                )
            )

    async def test_enabling_trials_on_hourly_role(self, test_db_session):
        company = await create_company(test_db_session)
        role = await create_company_role(test_db_session, company, PayRateType.HOURLY)
        service = CompanyRoleService(test_db_session)

        updated = await service.update_role(role.id, CompanyRoleUpdate(trial_enabled=True))

        assert updated.trial_enabled is True

    async def test_enabling_trials_on_project_based_role_is_rejected(self, test_db_session):
        company = await create_company(test_db_session)
        role = await create_company_role(test_db_session, company, PayRateType.PROJECT_BASED)
        service = CompanyRoleService(test_db_session)

        with pytest.raises(RecordInvalid) as exc_info:
            await service.update_role(role.id, CompanyRoleUpdate(trial_enabled=True))

        assert exc_info.value.errors == ["Can only set trials with hourly contracts"]
        persisted = await service.get_role(role.id)
        assert persisted.trial_enabled is False
        assert role.trial_enabled is False

    async def test_switching_trial_role_to_project_rate_is_rejected(self, test_db_session):
        company = await create_company(test_db_session)
        role = await create_company_role(test_db_session, company, PayRateType.HOURLY, trial_enabled=True)
        service = CompanyRoleService(test_db_session)

        with pytest.raises(RecordInvalid) as exc_info:
            await service.update_role(
                role.id,
                CompanyRoleUpdate(
                    rate=CompanyRoleRateCreate(pay_rate_type=PayRateType.PROJECT_BASED, pay_rate_in_subunits=100000)
                ),
            )

        assert exc_info.value.errors == ["Can only set trials with hourly contracts"]
        assert len(await service.list_rates(role.id)) == 1
        assert role.pay_rate_type == PayRateType.HOURLY

    async def test_new_rate_is_appended(self, test_db_session):
        company = await create_company(test_db_session)
        role = await create_company_role(test_db_session, company, PayRateType.HOURLY, pay_rate_in_subunits=6000)
        service = CompanyRoleService(test_db_session)

        updated = await service.update_role(
            role.id,
            CompanyRoleUpdate(rate=CompanyRoleRateCreate(pay_rate_type=PayRateType.HOURLY, pay_rate_in_subunits=7500)),
        )

        assert updated.pay_rate_in_subunits == 7500
        rates = await service.list_rates(role.id)
        assert [rate.pay_rate_in_subunits for rate in rates] == [7500, 6000]

    async def test_delete_blocked_until_contracts_end(self, test_db_session):
        company = await create_company(test_db_session)
        role = await create_company_role(test_db_session, company)
        contractor = await create_contractor(test_db_session, company, role)
        service = CompanyRoleService(test_db_session)

        with pytest.raises(RecordInvalid) as exc_info:
            await service.delete_role(role.id)
        assert exc_info.value.errors == ["Cannot delete role with active contractors"]
        assert await service.get_role(role.id) is not None
        assert role.deleted_at is None

        await ContractorService(test_db_session).end_contract(
            contractor.id,
            ContractorEnd(ended_at=utcnow() - timedelta(days=1)),
        )

        assert await service.delete_role(role.id) is True
        assert await service.get_role(role.id) is None

    async def test_contract_ending_in_future_still_blocks_delete(self, test_db_session):
        company = await create_company(test_db_session)
        role = await create_company_role(test_db_session, company)
        await create_contractor(test_db_session, company, role, ended_at=utcnow() + timedelta(days=30))
        service = CompanyRoleService(test_db_session)

        with pytest.raises(RecordInvalid):
            await service.delete_role(role.id)

    async def test_role_without_contractors_can_be_deleted(self, test_db_session):
        company = await create_company(test_db_session)
        role = await create_company_role(test_db_session, company)
        service = CompanyRoleService(test_db_session)

        assert await service.delete_role(role.id) is True
        assert await service.delete_role(role.id) is False

    async def test_actively_hiring_scope(self, test_db_session):
        company = await create_company(test_db_session)
        await create_company_role(test_db_session, company, name="Not hiring")
        hiring = await create_company_role(test_db_session, company, name="Hiring", actively_hiring=True)
        service = CompanyRoleService(test_db_session)

        roles = await service.list_actively_hiring()

        assert [role.id for role in roles] == [hiring.id]

    async def test_actively_hiring_scope_is_not_truncated(self, test_db_session):
        company = await create_company(test_db_session)
        for index in range(1005):
            role = CompanyRole(company_id=company.id, name=f"Role {index}", actively_hiring=True)
            role.assign_rate(PayRateType.HOURLY, 6000)
            test_db_session.add(role)
        await test_db_session.commit()

        roles = await CompanyRoleService(test_db_session).list_actively_hiring(company.id)

        assert len(roles) == 1005
