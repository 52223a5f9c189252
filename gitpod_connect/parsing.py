"""Parse the tabular output of `gitpod environment list`."""

from __future__ import annotations

from .models import EnvironmentRecord

# ID REPOSITORY BRANCH CLASS PHASE
_FIELD_COUNT = 5


def parse_environment_list(output: str) -> list[EnvironmentRecord]:
    """Turn the listing text into records, keeping input order.

    The first line is the header and is always skipped. Rows with fewer than
    five whitespace-separated fields are dropped; extra trailing fields are
    ignored.
    """

    records: list[EnvironmentRecord] = []
    for raw_line in output.strip().split("\n")[1:]:
        parts = raw_line.split()
        if len(parts) < _FIELD_COUNT:
            continue
        env_id, repository, branch, class_id, phase = parts[:_FIELD_COUNT]
        records.append(
            EnvironmentRecord(
                id=env_id,
                repository_url=repository,
                branch=branch,
                resource_class=class_id,
                phase=phase,
            )
        )
    return records
