from enum import Enum


class SortBy(str, Enum):
    name = "name"
    created = "created"


class SortDirection(str, Enum):
    ascending = "asc"
    descending = "desc"
