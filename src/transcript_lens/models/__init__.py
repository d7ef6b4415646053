"""Qt models for Transcript Lens."""

from transcript_lens.models.transcript_model import TranscriptModel
from transcript_lens.models.context_grid_model import ContextGridModel
from transcript_lens.models.model_usage_model import ModelUsageModel
from transcript_lens.models.release_notes_model import ReleaseNotesModel

__all__ = ["TranscriptModel", "ContextGridModel", "ModelUsageModel", "ReleaseNotesModel"]
