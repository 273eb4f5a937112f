from datetime import datetime, timedelta

import pytest

from src.app.use_cases.analytics import GetReportUseCase
from src.app.use_cases.analytics.performance import average, is_overdue, staff_performance
from src.domain.entities import CaseStatus, UserRole
from tests.factories import make_case, make_user

NOW = datetime(2025, 6, 30, 12, 0, 0)


@pytest.fixture
def people(admin_principal):
    org_id = admin_principal.organization_id
    staff = make_user(org_id, role=UserRole.staff, name="Sofía", id=admin_principal.id)
    client = make_user(org_id, role=UserRole.client, name="Pedro")
    return staff, client


@pytest.fixture
def cases(admin_principal, people):
    staff, client = people
    org_id = admin_principal.organization_id
    return [
        make_case(
            org_id,
            client.id,
            staff.id,
            status=CaseStatus.completed,
            filing_date=datetime(2025, 1, 1),
            completion_date=datetime(2025, 1, 11),
            created_at=datetime(2025, 1, 1),
        ),
        make_case(
            org_id,
            client.id,
            staff.id,
            status=CaseStatus.in_progress,
            deadline_date=NOW - timedelta(days=1),
            created_at=datetime(2025, 6, 15),
        ),
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("report_type,code", [(None, "REPORT_TYPE_REQUIRED"), ("sales", "INVALID_REPORT_TYPE")])
async def test_report_type_is_validated(mock_uow, admin_principal, report_type, code):
    result = await GetReportUseCase(mock_uow).execute(admin_principal, report_type)

    assert result.is_err()
    assert result.error.code == code
    mock_uow.cases.list.assert_not_called()


@pytest.mark.asyncio
async def test_case_summary_end_date_includes_whole_day(mock_uow, admin_principal, people, cases):
    mock_uow.users.list_in_scope.return_value = list(people)
    mock_uow.cases.list.return_value = cases

    result = await GetReportUseCase(mock_uow).execute(
        admin_principal,
        "case_summary",
        start_date=datetime(2025, 6, 1),
        end_date=datetime(2025, 6, 15),
        now=NOW,
    )

    assert result.is_ok()
    rows = result.value.report
    assert [row["case_number"] for row in rows] == [cases[1].case_number]
    assert rows[0]["client_name"] == "Pedro"
    assert rows[0]["staff_name"] == "Sofía"


@pytest.mark.asyncio
async def test_client_summary_counts_cases(mock_uow, admin_principal, people, cases):
    mock_uow.users.list_in_scope.return_value = list(people)
    mock_uow.cases.list.return_value = cases

    result = await GetReportUseCase(mock_uow).execute(admin_principal, "client_summary", now=NOW)

    (row,) = result.value.report
    assert row["name"] == "Pedro"
    assert row["total_cases"] == 2
    assert row["completed_cases"] == 1


def test_staff_performance(people, cases):
    staff, client = people

    (row,) = staff_performance([staff, client], cases, NOW)

    assert row.id == str(staff.id)
    assert row.total_cases == 2
    assert row.completed_cases == 1
    assert row.overdue_cases == 1
    assert row.avg_completion_days == 10.0


def test_overdue_ignores_closed_cases(cases):
    overdue = cases[1]
    closed = make_case(
        overdue.organization_id,
        overdue.client_id,
        status=CaseStatus.approved,
        deadline_date=overdue.deadline_date,
    )

    assert is_overdue(overdue, NOW)
    assert not is_overdue(closed, NOW)


def test_average():
    assert average([]) is None
    assert average([1, 2, 2]) == 1.7
