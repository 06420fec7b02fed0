# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional

from loguru import logger
from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from schedule_chart import time
from schedule_chart.model.activity import Activity
from schedule_chart.model.task import Task


class ActivityFileError(ValueError):
    """Raised when an activity file cannot be read into activities."""


class ActivityRepository:
    """
    Read-only access to the activities listed in a YAML file.

    The file holds a top level `activities` list; each activity has an `id`,
    a `title` and a `tasks` list of `status`, `start_date` and `end_date`.
    Dates may be plain YAML dates, timestamps or ISO strings. Nothing is
    validated beyond structure: tasks ending before they start are left for
    the sanitizer to drop.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._activities: Optional[list[Activity[str]]] = None

    @property
    def activities(self) -> list[Activity[str]]:
        if self._activities is None:
            self.__load_data()
        if self._activities is None:
            raise ActivityFileError(f"No activities loaded from {self.path}")
        return self._activities

    def __load_data(self) -> None:
        try:
            raw_data = load(self.path.read_text(), Loader=Loader)
        except OSError as e:
            raise ActivityFileError(f"Cannot read {self.path}: {e}") from e
        except YAMLError as e:
            raise ActivityFileError(f"{self.path} is not valid YAML: {e}") from e

        if raw_data is None:
            raw_data = {"activities": []}
        if not isinstance(raw_data, dict) or not isinstance(
            raw_data.get("activities"), list
        ):
            raise ActivityFileError(f"{self.path} must hold an 'activities' list")

        activities: list[Activity[str]] = []
        seen_ids: set[int] = set()
        for raw_activity in raw_data["activities"]:
            activity = self.__convert_activity_for_deserialization(raw_activity)
            if activity["id"] in seen_ids:
                raise ActivityFileError(f"Activity id {activity['id']} is not unique")
            seen_ids.add(activity["id"])
            activities.append(activity)

        logger.debug(f"Loaded {len(activities)} activities from {self.path}")
        self._activities = activities

    def __convert_activity_for_deserialization(
        self, raw_activity: Any
    ) -> Activity[str]:
        if not isinstance(raw_activity, dict):
            raise ActivityFileError(f"Activity entry {raw_activity!r} is not a mapping")
        try:
            activity_id = int(raw_activity["id"])
            title = str(raw_activity.get("title") or "")
            raw_tasks = raw_activity.get("tasks") or []
        except (KeyError, TypeError, ValueError) as e:
            raise ActivityFileError(
                f"Activity entry {raw_activity!r} needs an integer id"
            ) from e
        if not isinstance(raw_tasks, list):
            raise ActivityFileError(f"Tasks of activity {activity_id} must be a list")

        return {
            "id": activity_id,
            "title": title,
            "tasks": [
                self.__convert_task_for_deserialization(activity_id, raw_task)
                for raw_task in raw_tasks
            ],
        }

    def __convert_task_for_deserialization(
        self, activity_id: int, raw_task: Any
    ) -> Task[str]:
        if not isinstance(raw_task, dict):
            raise ActivityFileError(
                f"Task {raw_task!r} of activity {activity_id} is not a mapping"
            )
        try:
            return {
                "status": str(raw_task["status"]),
                "start_date": time.datetime_from_value(raw_task["start_date"]),
                "end_date": time.datetime_from_value(raw_task["end_date"]),
            }
        except KeyError as e:
            raise ActivityFileError(
                f"Task of activity {activity_id} is missing {e.args[0]!r}"
            ) from e
        except (TypeError, ValueError) as e:
            raise ActivityFileError(
                f"Task of activity {activity_id} has an invalid date: {e}"
            ) from e

    def get_all_activities(self) -> list[Activity[str]]:
        return list(self.activities)
