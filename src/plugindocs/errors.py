"""⚠️ Errors raised while building contexts and rendering templates."""

from __future__ import annotations

from pathlib import Path


class PluginDocsError(Exception):
    """Base exception for documentation rendering."""

    pass


class TemplateParseError(PluginDocsError):
    """Template text is not valid or calls an unknown helper."""

    def __init__(self, name: str, text: str, reason: str):
        self.name = name
        self.text = text
        self.reason = reason
        super().__init__(f"unable to parse template {name!r} ({text!r}): {reason}")


class TemplateExecutionError(PluginDocsError):
    """A compiled template failed while being executed."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"unable to execute template {name!r}: {reason}")


class SchemaRenderError(PluginDocsError):
    """A schema or function signature cannot be rendered to Markdown."""

    pass


class RenderStageError(PluginDocsError):
    """A collaborator failed while a context was being built."""

    def __init__(self, stage: str, reason: str):
        self.stage = stage
        self.reason = reason
        super().__init__(f"unable to render {stage}: {reason}")


class MetadataError(PluginDocsError):
    """Base exception for metadata file problems."""

    def __init__(self, path: Path | str, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class MetadataReadError(MetadataError):
    """Metadata file exists but could not be read."""

    pass


class MetadataDecodeError(MetadataError):
    """Metadata file content is not a flat string-to-string JSON object.

    Callers using the default ``abort`` policy stop the whole process on this
    error instead of moving on to the next document.
    """

    pass
