"""PIM data classes synchronised over EAS: e-mail, calendar, contacts and tasks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional


class BusyStatus(IntEnum):
    """Calendar busy status (MS-ASCAL 2.2.2.8)."""

    FREE = 0
    TENTATIVE = 1
    BUSY = 2
    OOF = 3
    WORKING_ELSEWHERE = 4


class Sensitivity(IntEnum):
    """Item sensitivity (MS-ASCAL 2.2.2.46)."""

    NORMAL = 0
    PERSONAL = 1
    PRIVATE = 2
    CONFIDENTIAL = 3


class MeetingStatus(IntEnum):
    """Named meeting status values (MS-ASCAL 2.2.2.32)."""

    NON_MEETING = 0
    MEETING = 1


_VALID_MEETING_STATUSES = frozenset({0, 1, 3, 5, 7, 9, 11, 13, 15})


def valid_meeting_status(v: int) -> bool:
    """Return True if ``v`` is a value defined for calendar MeetingStatus."""
    return v in _VALID_MEETING_STATUSES


class RecurrenceType(IntEnum):
    """Calendar recurrence type (MS-ASCAL 2.2.2.43.4)."""

    DAILY = 0
    WEEKLY = 1
    MONTHLY = 2
    MONTHLY_BY_DAY = 3
    YEARLY = 5
    YEARLY_BY_DAY = 6


class Importance(IntEnum):
    """E-mail importance (MS-ASEMAIL 2.2.2.40)."""

    LOW = 0
    NORMAL = 1
    HIGH = 2


class TaskImportance(IntEnum):
    """Task importance (MS-ASTASK 2.2.2.6)."""

    LOW = 0
    NORMAL = 1
    HIGH = 2


@dataclass
class Email:
    """An e-mail message as carried in Sync ApplicationData."""

    date_received: str = ""
    subject: str = ""
    from_: str = ""
    to: str = ""
    cc: str = ""
    reply_to: str = ""
    display_to: str = ""
    thread_topic: str = ""
    importance: int = 0
    read: bool = False
    message_class: str = ""
    content_class: str = ""


@dataclass
class Categories:
    """Calendar categories."""

    category: List[str] = field(default_factory=list)


@dataclass
class Attendee:
    """A single meeting attendee."""

    email: str = ""
    name: str = ""
    attendee_status: int = 0
    attendee_type: int = 0


@dataclass
class Attendees:
    """The attendee list of an appointment."""

    attendee: List[Attendee] = field(default_factory=list)


@dataclass
class Recurrence:
    """A calendar recurrence pattern."""

    type: int = 0
    until: str = ""
    occurrences: int = 0
    interval: int = 0
    day_of_week: int = 0
    day_of_month: int = 0
    week_of_month: int = 0
    month_of_year: int = 0


@dataclass
class Appointment:
    """A calendar item as carried in Sync ApplicationData."""

    uid: str = ""
    subject: str = ""
    location: str = ""
    start_time: str = ""
    end_time: str = ""
    all_day_event: int = 0
    organizer_email: str = ""
    organizer_name: str = ""
    busy_status: int = 0
    sensitivity: int = 0
    meeting_status: int = 0
    reminder: int = 0
    dt_stamp: str = ""
    categories: Optional[Categories] = None
    attendees: Optional[Attendees] = None
    recurrence: Optional[Recurrence] = None


@dataclass
class Contact:
    """A contact as carried in Sync ApplicationData."""

    first_name: str = ""
    last_name: str = ""
    middle_name: str = ""
    title: str = ""
    company_name: str = ""
    job_title: str = ""
    email1_address: str = ""
    email2_address: str = ""
    email3_address: str = ""
    home_phone_number: str = ""
    mobile_phone_number: str = ""
    business_phone_number: str = ""
    home_street: str = ""
    home_city: str = ""
    home_postal_code: str = ""
    home_country: str = ""


@dataclass
class TaskCategories:
    """Task categories."""

    category: List[str] = field(default_factory=list)


@dataclass
class TaskRecurrence:
    """A task recurrence pattern."""

    type: int = 0
    start: str = ""
    until: str = ""
    occurrences: int = 0
    interval: int = 0
    day_of_month: int = 0
    day_of_week: int = 0
    week_of_month: int = 0
    month_of_year: int = 0
    regenerate: int = 0
    dead_occur: int = 0


@dataclass
class Task:
    """A task as carried in Sync ApplicationData."""

    subject: str = ""
    start_date: str = ""
    utc_start_date: str = ""
    due_date: str = ""
    utc_due_date: str = ""
    importance: int = 0
    sensitivity: int = 0
    complete: int = 0
    date_completed: str = ""
    reminder_set: int = 0
    reminder_time: str = ""
    categories: Optional[TaskCategories] = None
    recurrence: Optional[TaskRecurrence] = None