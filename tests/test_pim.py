import dataclasses

import pytest

from activesync.pim import (
    Appointment,
    Attendee,
    Attendees,
    BusyStatus,
    Categories,
    Contact,
    Email,
    Importance,
    MeetingStatus,
    Recurrence,
    RecurrenceType,
    Sensitivity,
    Task,
    TaskCategories,
    TaskImportance,
    TaskRecurrence,
    valid_meeting_status,
)


@pytest.mark.parametrize(
    "value,member",
    [
        (0, BusyStatus.FREE),
        (1, BusyStatus.TENTATIVE),
        (2, BusyStatus.BUSY),
        (3, BusyStatus.OOF),
        (4, BusyStatus.WORKING_ELSEWHERE),
    ],
)
def test_busy_status_lookup(value, member):
    assert BusyStatus(value) is member


@pytest.mark.parametrize(
    "value,member",
    [
        (0, Sensitivity.NORMAL),
        (1, Sensitivity.PERSONAL),
        (2, Sensitivity.PRIVATE),
        (3, Sensitivity.CONFIDENTIAL),
    ],
)
def test_sensitivity_lookup(value, member):
    assert Sensitivity(value) is member


@pytest.mark.parametrize("value", [0, 1, 3, 5, 7, 9, 11, 13, 15])
def test_valid_meeting_status(value):
    assert valid_meeting_status(value) is True


@pytest.mark.parametrize("value", [2, 4, 6, 8, 10, 12, 14, 16, -1])
def test_invalid_meeting_status(value):
    assert valid_meeting_status(value) is False


def test_named_meeting_statuses_are_valid():
    assert all(valid_meeting_status(m) for m in MeetingStatus)


def test_recurrence_type_lookup():
    assert RecurrenceType(0) is RecurrenceType.DAILY
    assert RecurrenceType(3) is RecurrenceType.MONTHLY_BY_DAY
    assert RecurrenceType(5) is RecurrenceType.YEARLY
    assert RecurrenceType(6) is RecurrenceType.YEARLY_BY_DAY
    with pytest.raises(ValueError):
        RecurrenceType(4)


def test_importance_lookup():
    assert [Importance(v) for v in (0, 1, 2)] == [Importance.LOW, Importance.NORMAL, Importance.HIGH]
    assert [TaskImportance(v) for v in (0, 1, 2)] == [
        TaskImportance.LOW,
        TaskImportance.NORMAL,
        TaskImportance.HIGH,
    ]


def test_email_defaults_and_replace():
    base = Email()
    assert base.read is False
    assert base.importance == 0
    updated = dataclasses.replace(base, subject="Hello", read=True, importance=Importance.HIGH)
    assert updated.subject == "Hello"
    assert updated.read is True
    assert updated.importance == 2
    assert base.subject == ""


def test_appointment_equality_with_nested_values():
    def build():
        return Appointment(
            uid="uid-123",
            subject="Standup",
            busy_status=BusyStatus.BUSY,
            meeting_status=MeetingStatus.MEETING,
            categories=Categories(category=["work", "team"]),
            attendees=Attendees(attendee=[Attendee(email="bob@example.com", name="Bob", attendee_status=3, attendee_type=1)]),
            recurrence=Recurrence(type=RecurrenceType.DAILY, interval=1, occurrences=5),
        )

    a, b = build(), build()
    assert a == b
    b.attendees.attendee[0].name = "Robert"
    assert a != b


def test_appointment_optional_parts_default_to_none():
    appt = Appointment(subject="meet")
    assert (appt.categories, appt.attendees, appt.recurrence) == (None, None, None)


def test_list_defaults_are_not_shared():
    first, second = Categories(), Categories()
    first.category.append("x")
    assert second.category == []
    t1, t2 = TaskCategories(), TaskCategories()
    t1.category.append("work")
    assert t2.category == []
    a1, a2 = Attendees(), Attendees()
    a1.attendee.append(Attendee())
    assert a2.attendee == []


def test_contact_as_dict():
    contact = Contact(first_name="Alice", last_name="Smith", email1_address="a@example.com")
    data = dataclasses.asdict(contact)
    assert data["first_name"] == "Alice"
    assert data["email1_address"] == "a@example.com"
    assert data["home_country"] == ""
    assert Contact(**data) == contact


def test_task_as_dict_round_trip_values():
    task = Task(
        subject="Write report",
        importance=TaskImportance.HIGH,
        sensitivity=Sensitivity.PERSONAL,
        reminder_set=1,
        categories=TaskCategories(category=["work"]),
        recurrence=TaskRecurrence(type=RecurrenceType.WEEKLY, interval=1),
    )
    data = dataclasses.asdict(task)
    assert data["categories"] == {"category": ["work"]}
    assert data["recurrence"]["type"] == 1
    assert data["recurrence"]["interval"] == 1
    rebuilt = Task(
        **{**data, "categories": TaskCategories(**data["categories"]), "recurrence": TaskRecurrence(**data["recurrence"])}
    )
    assert rebuilt == task