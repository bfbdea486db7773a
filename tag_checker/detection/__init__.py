"""Tag detection package.

Known-site lookup, live fetching and per-vendor pattern matching.  The
public entry point is :class:`~tag_checker.detection.detector.TagDetector`.
"""
