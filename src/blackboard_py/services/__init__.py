"""Shape record loading services for blackboard-py."""

from blackboard_py.services.loader import iter_requests, load_file, load_lines, parse_record

__all__ = ["iter_requests", "load_file", "load_lines", "parse_record"]
