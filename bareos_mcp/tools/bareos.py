"""Bareos tools: map ``tools/call`` arguments onto bconsole commands."""
from typing import Any, Optional

from bareos_mcp.bconsole import BconsoleClient, JobFilter
from bareos_mcp.tools.base import Tool, ToolRegistry


# Arguments arrive as raw JSON values. Anything of the wrong type is
# treated as absent rather than rejected.

def _str_arg(kwargs: dict, key: str) -> Optional[str]:
    value = kwargs.get(key)
    return value if isinstance(value, str) else None


def _int_arg(kwargs: dict, key: str) -> Optional[int]:
    value = kwargs.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def _bool_arg(kwargs: dict, key: str) -> bool:
    return kwargs.get(key) is True


def job_filter_from_arguments(kwargs: dict) -> JobFilter:
    """Build a JobFilter from loosely typed ``list_jobs`` arguments."""
    return JobFilter(
        job=_str_arg(kwargs, "job"),
        client=_str_arg(kwargs, "client"),
        jobstatus=_str_arg(kwargs, "jobstatus"),
        jobtype=_str_arg(kwargs, "jobtype"),
        joblevel=_str_arg(kwargs, "joblevel"),
        volume=_str_arg(kwargs, "volume"),
        pool=_str_arg(kwargs, "pool"),
        days=_int_arg(kwargs, "days"),
        hours=_int_arg(kwargs, "hours"),
        last=_bool_arg(kwargs, "last"),
        count=_bool_arg(kwargs, "count"),
    )


def _string_prop(description: str) -> dict:
    return {"type": "string", "description": description}


_JOB_ID_SCHEMA = {
    "type": "object",
    "properties": {"job_id": _string_prop("The job ID to query")},
    "required": ["job_id"],
}

_NO_ARGS_SCHEMA = {"type": "object", "properties": {}}


def _name_schema(kind: str) -> dict:
    return {
        "type": "object",
        "properties": {"name": _string_prop(f"Name of the {kind} resource")},
        "required": ["name"],
    }


LIST_JOBS_SCHEMA = {
    "type": "object",
    "properties": {
        "job": _string_prop("Only jobs with this job name (optional)"),
        "client": _string_prop("Only jobs for this client (optional)"),
        "jobstatus": _string_prop("Only jobs with this status code, e.g. T, E, f, R (optional)"),
        "jobtype": _string_prop("Only jobs of this type, e.g. B, R, V (optional)"),
        "joblevel": _string_prop("Only jobs with this level, e.g. F, I, D (optional)"),
        "volume": _string_prop("Only jobs that wrote to this volume (optional)"),
        "pool": _string_prop("Only jobs that used this pool (optional)"),
        "days": {
            "type": "integer",
            "minimum": 0,
            "description": "List jobs from the last N days (optional)",
        },
        "hours": {
            "type": "integer",
            "minimum": 0,
            "description": "List jobs from the last N hours (optional)",
        },
        "last": {
            "type": "boolean",
            "description": "Only the most recent run of each job (optional)",
        },
        "count": {
            "type": "boolean",
            "description": "Return the number of matching jobs instead of the list (optional)",
        },
    },
}


def create_bareos_tools(registry: ToolRegistry, client: BconsoleClient) -> None:
    """Register the Bareos query tools backed by ``client``."""

    def _list_jobs(**kwargs: Any) -> str:
        return client.list_jobs(job_filter_from_arguments(kwargs))

    def _get_job_status(**kwargs: Any) -> str:
        return client.get_job_status(_str_arg(kwargs, "job_id") or "")

    def _get_job_log(**kwargs: Any) -> str:
        return client.get_job_log(_str_arg(kwargs, "job_id") or "")

    def _list_volumes(**kwargs: Any) -> str:
        return client.list_volumes(_str_arg(kwargs, "pool"))

    def _list_files(**kwargs: Any) -> str:
        return client.list_files(_str_arg(kwargs, "job_id") or "")

    def _show_job(**kwargs: Any) -> str:
        return client.show_job(_str_arg(kwargs, "name") or "")

    def _show_jobdefs(**kwargs: Any) -> str:
        return client.show_jobdefs(_str_arg(kwargs, "name") or "")

    def _show_schedule(**kwargs: Any) -> str:
        return client.show_schedule(_str_arg(kwargs, "name") or "")

    registry.register(Tool(
        name="list_jobs",
        description="List backup jobs with their status and details, optionally filtered",
        input_schema=LIST_JOBS_SCHEMA,
        func=_list_jobs))
    registry.register(Tool(
        name="get_job_status",
        description="Get detailed status of a specific job by ID",
        input_schema=_JOB_ID_SCHEMA,
        func=_get_job_status))
    registry.register(Tool(
        name="get_job_log",
        description="Get the log output for a specific job",
        input_schema=_JOB_ID_SCHEMA,
        func=_get_job_log))
    registry.register(Tool(
        name="list_clients", description="List all Bareos clients (file daemons)",
        input_schema=_NO_ARGS_SCHEMA, func=lambda **kwargs: client.list_clients()))
    registry.register(Tool(
        name="list_filesets", description="List all configured filesets",
        input_schema=_NO_ARGS_SCHEMA, func=lambda **kwargs: client.list_filesets()))
    registry.register(Tool(
        name="list_pools", description="List all storage pools",
        input_schema=_NO_ARGS_SCHEMA, func=lambda **kwargs: client.list_pools()))
    registry.register(Tool(
        name="list_volumes",
        description="List all volumes/media in storage",
        input_schema={
            "type": "object",
            "properties": {"pool": _string_prop("Filter by specific pool name (optional)")},
        },
        func=_list_volumes))
    registry.register(Tool(
        name="list_files",
        description="List all files backed up in a specific job",
        input_schema=_JOB_ID_SCHEMA,
        func=_list_files))
    registry.register(Tool(
        name="show_job",
        description="Show the configuration of a job resource",
        input_schema=_name_schema("job"),
        func=_show_job))
    registry.register(Tool(
        name="show_jobdefs",
        description="Show the configuration of a jobdefs resource",
        input_schema=_name_schema("jobdefs"),
        func=_show_jobdefs))
    registry.register(Tool(
        name="show_schedule",
        description="Show the configuration of a schedule resource",
        input_schema=_name_schema("schedule"),
        func=_show_schedule))


def build_registry(client: BconsoleClient) -> ToolRegistry:
    """Build the full tool table for ``client``."""
    registry = ToolRegistry()
    create_bareos_tools(registry, client)
    return registry
