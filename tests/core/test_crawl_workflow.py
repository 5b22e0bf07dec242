"""Crawl Workflow — tests for the status state machine and the CrawlJob aggregate.

Tests cover:
    - declared edges succeed, everything else raises InvalidTransitionError
    - terminal states have no outgoing edges, no self-loops anywhere
    - is_expired strictness and monotonicity
    - CrawlJob transitions return new values and stamp timestamps
    - record_batch promotes, completes, or rejects
    - status strings and naive timestamps loaded from storage
"""

from dataclasses import FrozenInstanceError
from datetime import timedelta
from itertools import product

import pytest

from llm_boost.core.domain_types import CrawlId, CrawlStatus, ProjectId
from llm_boost.core.errors import InvalidTransitionError
from llm_boost.core.crawl_workflow import (
    ALLOWED_TRANSITIONS,
    CrawlJob,
    INITIAL_STATUS,
    is_active,
    is_expired,
    is_terminal,
    transition,
)

PENDING = CrawlStatus.PENDING
CRAWLING = CrawlStatus.CRAWLING
COMPLETE = CrawlStatus.COMPLETE
FAILED = CrawlStatus.FAILED

DECLARED_EDGES = {(PENDING, CRAWLING), (CRAWLING, COMPLETE), (CRAWLING, FAILED)}


def _job(status=PENDING, **kwargs) -> CrawlJob:
    return CrawlJob(
        crawl_id=CrawlId("crawl-1"), project_id=ProjectId("proj-1"),
        status=status, **kwargs,
    )


# ─── status predicates ───────────────────────────────────────────

def test_initial_status_is_pending():
    assert INITIAL_STATUS == PENDING
    assert _job().status == PENDING


def test_active_and_terminal_partition_statuses():
    assert {s for s in CrawlStatus if is_active(s)} == {PENDING, CRAWLING}
    assert {s for s in CrawlStatus if is_terminal(s)} == {COMPLETE, FAILED}


def test_terminal_states_have_no_outgoing_edges():
    assert ALLOWED_TRANSITIONS[COMPLETE] == frozenset()
    assert ALLOWED_TRANSITIONS[FAILED] == frozenset()


# ─── transition ──────────────────────────────────────────────────

@pytest.mark.parametrize("current, requested", [
    (PENDING, CRAWLING), (CRAWLING, COMPLETE), (CRAWLING, FAILED),
])
def test_declared_edges_succeed(current, requested):
    assert transition(current, requested) == requested


@pytest.mark.parametrize(
    "current, requested",
    [pair for pair in product(CrawlStatus, CrawlStatus) if pair not in DECLARED_EDGES],
)
def test_undeclared_edges_raise(current, requested):
    with pytest.raises(InvalidTransitionError) as exc_info:
        transition(current, requested)
    assert exc_info.value.current == current.value
    assert exc_info.value.requested == requested.value


def test_crawling_self_loop_is_rejected():
    with pytest.raises(InvalidTransitionError):
        transition(CRAWLING, CRAWLING)


def test_full_lifecycle_then_terminal_self_loop_fails():
    status = transition(transition(PENDING, CRAWLING), COMPLETE)
    assert status == COMPLETE
    with pytest.raises(InvalidTransitionError):
        transition(status, COMPLETE)


def test_error_message_names_both_states():
    with pytest.raises(InvalidTransitionError) as exc_info:
        transition(COMPLETE, CRAWLING)
    assert "'complete'" in exc_info.value.message
    assert "'crawling'" in exc_info.value.message
    assert exc_info.value.code == "INVALID_TRANSITION"


# ─── is_expired ──────────────────────────────────────────────────

def test_is_expired_without_start_is_false(now):
    assert is_expired(None, 0, now) is False


def test_is_expired_is_strict(now):
    started = now - timedelta(minutes=60)
    assert is_expired(started, 60, now) is False
    assert is_expired(started - timedelta(seconds=1), 60, now) is True


def test_is_expired_is_monotonic(now):
    started = now - timedelta(minutes=90)
    assert is_expired(started, 60, now) is True
    for extra in (1, 30, 600):
        assert is_expired(started, 60, now + timedelta(minutes=extra)) is True


# ─── CrawlJob aggregate ──────────────────────────────────────────

def test_can_ingest_only_while_active():
    assert _job(CRAWLING).can_ingest() is True
    assert _job(PENDING).can_ingest() is True
    assert _job(COMPLETE).can_ingest() is False
    assert _job(FAILED).can_ingest() is False


def test_complete_job_cannot_go_back_to_crawling():
    with pytest.raises(InvalidTransitionError):
        _job(COMPLETE).transition(CRAWLING)


def test_job_expiry_two_hours_in(now):
    job = _job(CRAWLING, started_at=now - timedelta(hours=2))
    assert job.is_expired(60, now) is True
    assert job.is_expired(180, now) is False


def test_transition_returns_new_value(now):
    job = _job()
    started = job.start(at=now)
    assert job.status == PENDING
    assert started.status == CRAWLING
    assert started is not job


def test_start_stamps_started_at_once(now):
    started = _job().start(at=now)
    assert started.started_at == now
    done = started.complete(at=now + timedelta(minutes=5))
    assert done.started_at == now
    assert done.completed_at == now + timedelta(minutes=5)


def test_fail_records_message(now):
    failed = _job(CRAWLING, started_at=now).fail("crawler down", at=now)
    assert failed.status == FAILED
    assert failed.error_message == "crawler down"
    assert failed.completed_at == now


def test_fail_from_pending_is_invalid():
    with pytest.raises(InvalidTransitionError):
        _job(PENDING).fail("nope")


def test_job_is_frozen():
    with pytest.raises(FrozenInstanceError):
        _job().status = CRAWLING


# ─── record_batch ────────────────────────────────────────────────

def test_first_batch_promotes_pending_job(now):
    job = _job().record_batch(is_final=False, at=now)
    assert job.status == CRAWLING
    assert job.started_at == now


def test_intermediate_batch_leaves_crawling_job_unchanged(now):
    job = _job(CRAWLING, started_at=now)
    assert job.record_batch(is_final=False, at=now) == job


def test_final_batch_completes_job(now):
    job = _job(CRAWLING, started_at=now).record_batch(is_final=True, at=now)
    assert job.status == COMPLETE


def test_single_final_batch_on_pending_job(now):
    job = _job().record_batch(is_final=True, at=now)
    assert job.status == COMPLETE
    assert job.started_at == now


@pytest.mark.parametrize("status", [COMPLETE, FAILED])
@pytest.mark.parametrize("is_final", [True, False])
def test_batch_on_terminal_job_raises(status, is_final):
    with pytest.raises(InvalidTransitionError):
        _job(status).record_batch(is_final=is_final)


# ─── stored values ───────────────────────────────────────────────

def test_string_status_is_coerced_to_enum():
    job = _job("crawling")
    assert job.status is CRAWLING
    assert job.can_ingest() is True


def test_string_status_complete_cannot_go_back_to_crawling():
    with pytest.raises(InvalidTransitionError) as exc_info:
        _job("complete").transition("crawling")
    assert exc_info.value.current == "complete"
    assert exc_info.value.requested == "crawling"


def test_string_status_job_completes(now):
    done = _job("crawling", started_at=now).complete(at=now)
    assert done.status is COMPLETE


def test_unknown_string_status_is_rejected():
    with pytest.raises(ValueError):
        _job("scoring")


def test_naive_started_at_is_read_as_utc(now):
    naive = (now - timedelta(hours=2)).replace(tzinfo=None)
    assert is_expired(naive, 60, now) is True
    assert is_expired(naive, 180, now) is False


def test_naive_now_is_read_as_utc(now):
    started = now - timedelta(hours=2)
    assert is_expired(started, 60, now.replace(tzinfo=None)) is True


def test_naive_job_expiry(now):
    job = _job("crawling", started_at=(now - timedelta(hours=2)).replace(tzinfo=None))
    assert job.is_expired(60, now) is True
