# SPDX-License-Identifier: MIT

from typing import TypeAlias

TaskId: TypeAlias = str
RunId: TypeAlias = str
