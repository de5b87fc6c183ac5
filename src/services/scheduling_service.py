"""Scheduling service: due dates and status for recurring household tasks.

This module provides functions for:
- Resolving the next due date of a task from its recurrence rule
- Classifying a task as overdue, due today, or upcoming
- Dashboard helpers (tasks scheduled today, completion rate, urgency order)

Key Concepts:
- Anchor: the local date of the last completion, or of creation when the task
  was never completed, or today when neither is known.
- Floating schedule: daily and weekly tasks move with actual completions, so
  finishing early or late shifts the next occurrence. Monthly tasks are pinned
  to the 1st of the month.
- Local dates: every timestamp is reduced to a local calendar date before any
  arithmetic. "now" is snapshotted once per call and passed down.

All functions are total: malformed recurrence settings fall back to the
default rule (due on the anchor, or the day after it once completed).
"""

import logging
import math
from collections.abc import Iterable
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from src.core.config import constants
from src.core.dates import current_time, local_today, to_local_date, weekday_index
from src.core.logging import log_with_context, span
from src.domain.task import DueStatus, RecurrenceType, Task
from src.models.service_models import TaskSchedule, TaskStatus


logger = logging.getLogger(__name__)


def _anchor_date(task: Task, today: date) -> date:
    if task.last_completed is not None:
        return to_local_date(task.last_completed)
    if task.created_at is not None:
        return to_local_date(task.created_at)
    return today


def _next_weekly_date(*, anchor: date, days: set[int], completed: bool) -> date | None:
    """Scan forward from the anchor for the first day whose weekday is in `days`."""
    # Skip the completion day itself once the task has been done
    start = anchor + timedelta(days=1 if completed else 0)
    for offset in range(constants.WEEKLY_SCAN_DAYS):
        candidate = start + timedelta(days=offset)
        if weekday_index(candidate) in days:
            return candidate
    return None


def next_due_date(task: Task, *, now: datetime | None = None) -> date:
    """Calculate the date a task is next due.

    Args:
        task: Task with recurrence fields and completion history
        now: Current time; read from the clock when omitted. Only used when the
            task has neither a completion nor a creation time.

    Returns:
        Local calendar date of the next occurrence
    """
    today = local_today(now)
    anchor = _anchor_date(task, today)
    completed = task.last_completed is not None

    match task.recurrence_type:
        case RecurrenceType.DAILY:
            if not completed:
                return anchor
            try:
                return anchor + timedelta(days=task.interval)
            except OverflowError:
                logger.debug("Interval %d days out of range for task %s; using fallback rule", task.interval, task.id)
                return anchor + timedelta(days=1)

        case RecurrenceType.WEEKLY if task.recurrence_days:
            due = _next_weekly_date(anchor=anchor, days=set(task.recurrence_days), completed=completed)
            if due is None:
                log_with_context(
                    logger,
                    "debug",
                    "No matching weekday within scan window; using anchor",
                    task_id=task.id,
                    recurrence_days=task.recurrence_days,
                )
                return anchor
            return due

        case RecurrenceType.MONTHLY:
            due = anchor.replace(day=constants.MONTHLY_DUE_DAY)
            if not completed:
                return due
            try:
                return due + relativedelta(months=task.interval)
            except (OverflowError, ValueError):
                logger.debug(
                    "Interval %d months out of range for task %s; using fallback rule", task.interval, task.id
                )
                return anchor + timedelta(days=1)

        case _:
            if task.recurrence_type == RecurrenceType.WEEKLY:
                logger.debug("Weekly task %s has no recurrence days; using fallback rule", task.id)
            if not completed:
                return anchor
            return anchor + timedelta(days=1)


def task_status(task: Task, *, now: datetime | None = None) -> TaskStatus:
    """Classify a task relative to today.

    A task completed today is reported as upcoming with a zero offset,
    whatever its recurrence. Callers that need to tell "done today" apart from
    "upcoming" should check `is_completed_today` as well.

    Args:
        task: Task to classify
        now: Current time; read from the clock once when omitted

    Returns:
        TaskStatus with the status and signed day offset (negative when overdue)
    """
    if now is None:
        now = current_time()
    today = to_local_date(now)

    if task.last_completed is not None and to_local_date(task.last_completed) == today:
        return TaskStatus(status=DueStatus.UPCOMING, days_diff=0)

    days_diff = (next_due_date(task, now=now) - today).days

    if days_diff < 0:
        return TaskStatus(status=DueStatus.OVERDUE, days_diff=days_diff)
    if days_diff == 0:
        return TaskStatus(status=DueStatus.DUE_TODAY, days_diff=0)
    return TaskStatus(status=DueStatus.UPCOMING, days_diff=days_diff)


def is_completed_today(task: Task, *, now: datetime | None = None) -> bool:
    """Return True if the task's last completion falls on today's local date."""
    if task.last_completed is None:
        return False
    today = local_today(now)
    return to_local_date(task.last_completed) == today


def is_scheduled_today(task: Task, *, now: datetime | None = None) -> bool:
    """Return True if the task's recurrence rule puts an occurrence on today.

    Daily tasks are always scheduled, weekly tasks on their selected weekdays,
    monthly tasks on the 1st. Custom and one-off tasks never appear.
    """
    today = local_today(now)

    match task.recurrence_type:
        case RecurrenceType.DAILY:
            return True
        case RecurrenceType.WEEKLY if task.recurrence_days is not None:
            return weekday_index(today) in task.recurrence_days
        case RecurrenceType.MONTHLY:
            return today.day == constants.MONTHLY_DUE_DAY
        case _:
            return False


def get_todays_tasks(tasks: Iterable[Task], *, now: datetime | None = None) -> tuple[list[Task], list[Task]]:
    """Split the tasks scheduled for today into pending and completed.

    Args:
        tasks: Tasks to filter
        now: Current time; read from the clock once when omitted

    Returns:
        Tuple of (pending, completed_today), each in input order
    """
    if now is None:
        now = current_time()

    pending: list[Task] = []
    completed: list[Task] = []
    for task in tasks:
        if not is_scheduled_today(task, now=now):
            continue
        if is_completed_today(task, now=now):
            completed.append(task)
        else:
            pending.append(task)
    return pending, completed


def completion_rate(tasks: Iterable[Task], *, now: datetime | None = None) -> int:
    """Percentage of tasks completed today, rounded half up (0 for no tasks)."""
    if now is None:
        now = current_time()

    task_list = list(tasks)
    if not task_list:
        return 0
    done = sum(1 for task in task_list if is_completed_today(task, now=now))
    return math.floor(done * 100 / len(task_list) + 0.5)


def sort_by_urgency(tasks: Iterable[Task], *, now: datetime | None = None) -> list[TaskSchedule]:
    """Resolve every task against one snapshot of now and order most overdue first.

    Args:
        tasks: Tasks to schedule
        now: Current time; read from the clock once when omitted

    Returns:
        List of TaskSchedule sorted by ascending day offset; ties keep input order
    """
    with span("scheduling_service.sort_by_urgency"):
        if now is None:
            now = current_time()

        schedules: list[TaskSchedule] = []
        for task in tasks:
            status = task_status(task, now=now)
            schedules.append(
                TaskSchedule(
                    task=task,
                    due_date=next_due_date(task, now=now),
                    status=status.status,
                    days_diff=status.days_diff,
                )
            )

        schedules.sort(key=lambda s: s.days_diff)
        overdue = sum(1 for s in schedules if s.status == DueStatus.OVERDUE)
        logger.debug("Scheduled %d tasks (%d overdue)", len(schedules), overdue)
        return schedules
