#!/usr/bin/env python3
"""進捗表示のテスト"""
import io

from z3_uploader.utils.progress import ProgressTracker


def test_accumulates_bytes():
    out = io.StringIO()
    tracker = ProgressTracker(0, "mykey", stream=out)

    tracker(100)
    tracker(50)

    assert tracker.uploaded_size == 150


def test_unknown_total_shows_bytes_only():
    out = io.StringIO()
    tracker = ProgressTracker(0, "mykey", stream=out)
    tracker.start_time -= 1

    tracker(1024)

    assert "mykey: 1024 bytes" in out.getvalue()
    assert "%" not in out.getvalue()


def test_percentage_with_estimated_total():
    out = io.StringIO()
    tracker = ProgressTracker(200, "mykey", stream=out)
    tracker.start_time -= 1

    tracker(50)

    assert "25.0% (50/200)" in out.getvalue()


def test_percentage_capped_when_estimate_too_small():
    out = io.StringIO()
    tracker = ProgressTracker(10, "mykey", stream=out)
    tracker.start_time -= 1

    tracker(40)

    assert "100.0%" in out.getvalue()


def test_complete():
    out = io.StringIO()
    tracker = ProgressTracker(0, "mykey", stream=out)
    tracker(10)

    tracker.complete()

    assert "mykey: Complete! 10 bytes" in out.getvalue()
