from .models import (
    ArtifactSource,
    BatchResult,
    FileOutcome,
    ImageFile,
    NamingRules,
    OcrArtifact,
    OutcomeStatus,
)

__all__ = [
    "ArtifactSource",
    "BatchResult",
    "FileOutcome",
    "ImageFile",
    "NamingRules",
    "OcrArtifact",
    "OutcomeStatus",
]
