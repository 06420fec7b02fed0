import itertools

import pytest

from schedule_chart.model.configuration import Configuration
from schedule_chart.model.task import Task
from schedule_chart.service.schedule import calculate_schedule

from conftest import TaskStatus, day, make_task

TIMELINE_START = day(2021, 10, 1)


def schedule(tasks: list[Task[TaskStatus]], configuration: Configuration[TaskStatus]):
    return calculate_schedule(
        tasks,
        TIMELINE_START,
        configuration["is_completed"],
        configuration["get_most_relevant_status"],
    )


def test_no_tasks_give_no_spans(configuration: Configuration[TaskStatus]) -> None:
    assert schedule([], configuration) == []


def test_splits_non_intersecting_tasks(
    configuration: Configuration[TaskStatus],
) -> None:
    tasks = [
        make_task(TaskStatus.CLOSED, day(2021, 10, 1), day(2021, 10, 5)),
        make_task(TaskStatus.IN_PROGRESS, day(2021, 10, 7), day(2021, 10, 10)),
    ]

    timeline = schedule(tasks, configuration)

    assert len(timeline) == 2
    assert (timeline[0]["relative_start_date"], timeline[0]["relative_end_date"]) == (1, 5)
    assert (timeline[1]["relative_start_date"], timeline[1]["relative_end_date"]) == (7, 10)
    assert timeline[0]["status"] == TaskStatus.CLOSED
    assert timeline[1]["status"] == TaskStatus.IN_PROGRESS

    first, second = timeline[0]["checkpoints"], timeline[1]["checkpoints"]
    assert len(first) == 1
    assert len(second) == 1
    assert first[0]["relative_date"] == 5
    assert second[0]["relative_date"] == 7
    assert first[0]["active_tasks"] == []
    assert len(first[0]["completed_tasks"]) == 1
    assert len(second[0]["active_tasks"]) == 1
    assert second[0]["completed_tasks"] == []

    completed = first[0]["completed_tasks"][0]
    assert completed["index"] == 1
    assert completed["relative_start_date"] == 1
    assert completed["relative_end_date"] == 5
    active = second[0]["active_tasks"][0]
    assert active["index"] == 1
    assert active["relative_start_date"] == 7
    assert active["relative_end_date"] == 10


def test_joins_intersecting_tasks(configuration: Configuration[TaskStatus]) -> None:
    tasks = [
        make_task(TaskStatus.IN_PROGRESS, day(2021, 10, 1), day(2021, 10, 10)),
        make_task(TaskStatus.CLOSED, day(2021, 10, 2), day(2021, 10, 5)),
        make_task(TaskStatus.IN_PROGRESS, day(2021, 10, 7), day(2021, 10, 9)),
        make_task(TaskStatus.IN_PROGRESS, day(2021, 10, 8), day(2021, 10, 12)),
    ]

    timeline = schedule(tasks, configuration)

    assert len(timeline) == 1
    span = timeline[0]
    assert span["relative_start_date"] == 1
    assert span["relative_end_date"] == 12
    assert span["status"] == TaskStatus.IN_PROGRESS

    checkpoints = span["checkpoints"]
    assert [checkpoint["relative_date"] for checkpoint in checkpoints] == [1, 5, 7, 8]
    assert [
        (len(checkpoint["active_tasks"]), len(checkpoint["completed_tasks"]))
        for checkpoint in checkpoints
    ] == [(1, 0), (0, 1), (1, 0), (1, 0)]

    listed = [
        checkpoints[0]["active_tasks"][0],
        checkpoints[1]["completed_tasks"][0],
        checkpoints[2]["active_tasks"][0],
        checkpoints[3]["active_tasks"][0],
    ]
    assert [
        (task["index"], task["relative_start_date"], task["relative_end_date"])
        for task in listed
    ] == [(1, 1, 10), (2, 2, 5), (3, 7, 9), (4, 8, 12)]


def test_joins_tasks_starting_on_same_day(
    configuration: Configuration[TaskStatus],
) -> None:
    tasks = [
        make_task(TaskStatus.IN_PROGRESS, day(2021, 10, 1), day(2021, 10, 10)),
        make_task(TaskStatus.IN_PROGRESS, day(2021, 10, 1), day(2021, 10, 5)),
    ]

    timeline = schedule(tasks, configuration)

    assert len(timeline) == 1
    assert (timeline[0]["relative_start_date"], timeline[0]["relative_end_date"]) == (1, 10)
    checkpoints = timeline[0]["checkpoints"]
    assert len(checkpoints) == 1
    assert checkpoints[0]["relative_date"] == 1
    assert checkpoints[0]["completed_tasks"] == []
    assert [
        (task["index"], task["relative_start_date"], task["relative_end_date"])
        for task in checkpoints[0]["active_tasks"]
    ] == [(1, 1, 5), (2, 1, 10)]


def test_joins_tasks_completing_on_same_day(
    configuration: Configuration[TaskStatus],
) -> None:
    tasks = [
        make_task(TaskStatus.CLOSED, day(2021, 10, 1), day(2021, 10, 10)),
        make_task(TaskStatus.CLOSED, day(2021, 10, 7), day(2021, 10, 10)),
    ]

    timeline = schedule(tasks, configuration)

    assert len(timeline) == 1
    assert (timeline[0]["relative_start_date"], timeline[0]["relative_end_date"]) == (1, 10)
    checkpoints = timeline[0]["checkpoints"]
    assert len(checkpoints) == 1
    assert checkpoints[0]["relative_date"] == 10
    assert checkpoints[0]["active_tasks"] == []
    assert [
        (task["index"], task["relative_start_date"], task["relative_end_date"])
        for task in checkpoints[0]["completed_tasks"]
    ] == [(1, 1, 10), (2, 7, 10)]


def test_joins_tasks_sharing_a_boundary_day(
    configuration: Configuration[TaskStatus],
) -> None:
    tasks = [
        make_task(TaskStatus.CLOSED, day(2021, 10, 1), day(2021, 10, 5)),
        make_task(TaskStatus.IN_PROGRESS, day(2021, 10, 5), day(2021, 10, 10)),
    ]

    timeline = schedule(tasks, configuration)

    assert len(timeline) == 1
    assert (timeline[0]["relative_start_date"], timeline[0]["relative_end_date"]) == (1, 10)
    checkpoints = timeline[0]["checkpoints"]
    assert len(checkpoints) == 1
    assert checkpoints[0]["relative_date"] == 5
    active = checkpoints[0]["active_tasks"][0]
    completed = checkpoints[0]["completed_tasks"][0]
    assert (active["index"], active["relative_start_date"], active["relative_end_date"]) == (2, 5, 10)
    assert (
        completed["index"],
        completed["relative_start_date"],
        completed["relative_end_date"],
    ) == (1, 1, 5)


def test_tasks_on_consecutive_days_are_separate_spans(
    configuration: Configuration[TaskStatus],
) -> None:
    tasks = [
        make_task(TaskStatus.OPEN, day(2021, 10, 1), day(2021, 10, 3)),
        make_task(TaskStatus.OPEN, day(2021, 10, 4), day(2021, 10, 6)),
    ]

    timeline = schedule(tasks, configuration)

    assert [
        (span["relative_start_date"], span["relative_end_date"]) for span in timeline
    ] == [(1, 3), (4, 6)]


def test_checkpoints_are_ordered_by_day(
    configuration: Configuration[TaskStatus],
) -> None:
    # The long completed task is swept first but checkpoints on its last day
    tasks = [
        make_task(TaskStatus.CLOSED, day(2021, 10, 1), day(2021, 10, 9)),
        make_task(TaskStatus.OPEN, day(2021, 10, 3), day(2021, 10, 4)),
    ]

    checkpoints = schedule(tasks, configuration)[0]["checkpoints"]

    assert [checkpoint["relative_date"] for checkpoint in checkpoints] == [3, 9]


def test_relative_dates_count_from_timeline_start(
    configuration: Configuration[TaskStatus],
) -> None:
    tasks = [make_task(TaskStatus.OPEN, day(2021, 10, 30), day(2021, 11, 2))]

    timeline = calculate_schedule(
        tasks,
        day(2021, 10, 25),
        configuration["is_completed"],
        configuration["get_most_relevant_status"],
    )

    assert (timeline[0]["relative_start_date"], timeline[0]["relative_end_date"]) == (6, 9)


def test_span_status_comes_from_reducer(
    configuration: Configuration[TaskStatus],
) -> None:
    tasks = [
        make_task(TaskStatus.CLOSED, day(2021, 10, 1), day(2021, 10, 3)),
        make_task(TaskStatus.OPEN, day(2021, 10, 2), day(2021, 10, 4)),
    ]
    seen: list[list[TaskStatus]] = []

    def least_relevant(statuses: list[TaskStatus]) -> TaskStatus:
        seen.append(statuses)
        return TaskStatus.CLOSED

    timeline = calculate_schedule(
        tasks, TIMELINE_START, configuration["is_completed"], least_relevant
    )

    assert timeline[0]["status"] == TaskStatus.CLOSED
    assert seen == [[TaskStatus.CLOSED, TaskStatus.OPEN]]
    assert schedule(tasks, configuration)[0]["status"] == TaskStatus.OPEN


def test_input_tasks_are_not_modified(
    configuration: Configuration[TaskStatus],
) -> None:
    tasks = [
        make_task(TaskStatus.OPEN, day(2021, 10, 4), day(2021, 10, 6)),
        make_task(TaskStatus.OPEN, day(2021, 10, 1), day(2021, 10, 2)),
    ]

    schedule(tasks, configuration)

    assert tasks == [
        make_task(TaskStatus.OPEN, day(2021, 10, 4), day(2021, 10, 6)),
        make_task(TaskStatus.OPEN, day(2021, 10, 1), day(2021, 10, 2)),
    ]


MIXED_TASKS = [
    make_task(TaskStatus.OPEN, day(2021, 10, 1), day(2021, 10, 2)),
    make_task(TaskStatus.CLOSED, day(2021, 10, 2), day(2021, 10, 6)),
    make_task(TaskStatus.IN_PROGRESS, day(2021, 10, 4), day(2021, 10, 4)),
    make_task(TaskStatus.CLOSED, day(2021, 10, 8), day(2021, 10, 9)),
    make_task(TaskStatus.OPEN, day(2021, 10, 9), day(2021, 10, 14)),
    make_task(TaskStatus.IN_PROGRESS, day(2021, 10, 16), day(2021, 10, 16)),
    make_task(TaskStatus.CLOSED, day(2021, 10, 16), day(2021, 10, 20)),
]


@pytest.mark.parametrize(
    "tasks",
    [
        MIXED_TASKS,
        list(reversed(MIXED_TASKS)),
        MIXED_TASKS[::2],
        MIXED_TASKS[1::2],
    ],
)
def test_spans_partition_tasks(
    tasks: list[Task[TaskStatus]], configuration: Configuration[TaskStatus]
) -> None:
    timeline = schedule(tasks, configuration)

    members = [
        task
        for span in timeline
        for checkpoint in span["checkpoints"]
        for task in checkpoint["active_tasks"] + checkpoint["completed_tasks"]
    ]
    assert sorted(
        (task["start_date"], task["end_date"], task["status"]) for task in members
    ) == sorted((task["start_date"], task["end_date"], task["status"]) for task in tasks)

    starts = [span["relative_start_date"] for span in timeline]
    assert starts == sorted(starts)
    for previous, following in itertools.pairwise(timeline):
        assert previous["relative_end_date"] < following["relative_start_date"]

    for span in timeline:
        days = [checkpoint["relative_date"] for checkpoint in span["checkpoints"]]
        assert days == sorted(set(days))

        span_tasks = [
            task
            for checkpoint in span["checkpoints"]
            for task in checkpoint["active_tasks"] + checkpoint["completed_tasks"]
        ]
        assert sorted(task["index"] for task in span_tasks) == list(
            range(1, len(span_tasks) + 1)
        )
        assert span["relative_start_date"] == min(
            task["relative_start_date"] for task in span_tasks
        )
        assert span["relative_end_date"] == max(
            task["relative_end_date"] for task in span_tasks
        )

        for checkpoint in span["checkpoints"]:
            for task in checkpoint["completed_tasks"]:
                assert configuration["is_completed"](task["status"])
                assert task["relative_end_date"] == checkpoint["relative_date"]
            for task in checkpoint["active_tasks"]:
                assert not configuration["is_completed"](task["status"])
                assert task["relative_start_date"] == checkpoint["relative_date"]
