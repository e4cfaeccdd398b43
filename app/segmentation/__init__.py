from .segmenter import DocumentSegments, HeaderMatch, SectionSegment, classify_header, segment_document, split_lines

__all__ = [
    "DocumentSegments",
    "HeaderMatch",
    "SectionSegment",
    "classify_header",
    "segment_document",
    "split_lines",
]
