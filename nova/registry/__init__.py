"""Registry operations — clone, add, edit and remove stored configs."""

from nova.registry.clone import CloneResult, clone_records
from nova.registry.edit import EditResult, edit_record, temp_path_for
from nova.registry.editor import EditorLauncher, resolve_editor_command
from nova.registry.ingest import AddResult, add_record
from nova.registry.remove import remove_record

__all__ = [
    "AddResult",
    "CloneResult",
    "EditResult",
    "EditorLauncher",
    "add_record",
    "clone_records",
    "edit_record",
    "remove_record",
    "resolve_editor_command",
    "temp_path_for",
]
