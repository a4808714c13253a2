"""Recognition, assembly and serialization stages."""
from .assemble import assemble, join_full_text
from .document import BoundingQuad, Line, Point2D, ResultDocument, Word
from .pipeline import TextExtractionPipeline
from .recognize import recognize
from .serialize import deserialize, serialize, to_dict

__all__ = [
    "BoundingQuad",
    "Line",
    "Point2D",
    "ResultDocument",
    "TextExtractionPipeline",
    "Word",
    "assemble",
    "deserialize",
    "join_full_text",
    "recognize",
    "serialize",
    "to_dict",
]
