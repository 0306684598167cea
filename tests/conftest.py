"""Shared fixtures for the org chart tests."""

import pytest

from org_chart.records import EmployeeRecord

HEADER = [
    "Name",
    "User ID",
    "Job Title",
    "Business Card Title",
    "Organization Name",
    "Location",
    "Email",
    "Telephone",
    "Mobile",
    "Home Phone",
    "Manager UID",
    "Status",
    "Employee Type",
    "Region",
]


def make_row(name, uid, title="", manager="", status="Current Employee", **extra):
    values = {
        "Name": name,
        "User ID": uid,
        "Job Title": title,
        "Manager UID": manager,
        "Status": status,
    }
    values.update({k.replace("_", " "): v for k, v in extra.items()})
    return [values.get(col, "") for col in HEADER]


def make_record(name, uid, title="", manager="", **fields):
    return EmployeeRecord(
        name=name, user_id=uid, job_title=title, manager_user_id=manager, **fields
    )


@pytest.fixture
def sample_rows():
    return [
        HEADER,
        make_row("Ann", "a1", "Senior Director", "",
                 Organization_Name="Engineering", Location="Berlin",
                 Email="ann@example.com", Telephone="+49 1"),
        make_row("Bob", "b1", "Manager", "a1",
                 Organization_Name="Engineering", Location="Berlin"),
        make_row("Cid", "c1", "Engineer", "zz",
                 Organization_Name="Sales", Location="Paris"),
        make_row("Dee", "d1", "Intern", "b1", Location="Berlin"),
        make_row("Eve", "e1", "Director", "", status="Former Employee"),
    ]


@pytest.fixture
def sample_records():
    return [
        make_record("Ann", "a1", "Senior Director", "",
                    organization="Engineering", location="Berlin",
                    email="ann@example.com", telephone="+49 1"),
        make_record("Bob", "b1", "Manager", "a1",
                    organization="Engineering", location="Berlin"),
        make_record("Cid", "c1", "Engineer", "zz",
                    organization="Sales", location="Paris"),
        make_record("Dee", "d1", "Intern", "b1", location="Berlin"),
    ]
