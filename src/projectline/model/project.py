# SPDX-License-Identifier: MIT

from typing import TypedDict


class Projects(TypedDict):
    projects: list[str]
