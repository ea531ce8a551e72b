"""Unit tests for delivery routing."""

from __future__ import annotations

import concurrent.futures

import pytest

from labrobot.dispatch import Delivery, Dispatcher, RouteOutcome, resolve_event_type
from labrobot.gitlab import NoteableType, PushEvent
from tests.helpers.fake_logger import fake_context
from tests.helpers.gitlab_payloads import (
    encode,
    issue_comment_payload,
    issue_payload,
    merge_comment_payload,
    push_payload,
)
from tests.helpers.robots import IdleRobot, PushOnlyRobot, RecordingRobot


def _note_on(noteable: NoteableType) -> bytes:
    return encode({"object_attributes": {"noteable_type": str(noteable)}})


class TestRoute:
    """Tests for ``Dispatcher.route``."""

    def test_unregistered_event_type_is_not_decoded(self) -> None:
        """A push-only robot ignores issue deliveries without decoding them."""
        robot = PushOnlyRobot()
        dispatcher = Dispatcher.for_robot(robot)
        log, logger = fake_context()

        outcome = dispatcher.route("Issue Hook", b"definitely not json", log)

        assert outcome is RouteOutcome.NO_HANDLER_REGISTERED
        assert robot.calls == []
        assert logger.records == []

    def test_unknown_event_type_is_not_an_error(self) -> None:
        """Event types no route knows about are reported, not raised."""
        dispatcher = Dispatcher.for_robot(RecordingRobot())
        log, logger = fake_context()

        outcome = dispatcher.route("Pipeline Hook", b"{}", log)

        assert outcome is RouteOutcome.NO_HANDLER_REGISTERED
        assert logger.records == []

    def test_idle_robot_handles_nothing(self) -> None:
        """A robot without capabilities yields an empty table."""
        dispatcher = Dispatcher.for_robot(IdleRobot())

        assert dict(dispatcher.table) == {}
        assert not dispatcher.handles("Push Hook")

    def test_registered_event_type_is_dispatched(self) -> None:
        """A known event type reaches its handler."""
        robot = PushOnlyRobot()
        dispatcher = Dispatcher.for_robot(robot)
        log, _ = fake_context()

        outcome = dispatcher.route("Push Hook", encode(push_payload()), log)

        assert outcome is RouteOutcome.DISPATCHED
        assert robot.methods() == ["handle_push_event"]

    def test_decode_failure_still_reports_dispatched(self) -> None:
        """Decode failures are absorbed by the bound function."""
        robot = PushOnlyRobot()
        dispatcher = Dispatcher.for_robot(robot)
        log, logger = fake_context()

        outcome = dispatcher.route("Push Hook", b"{", log)

        assert outcome is RouteOutcome.DISPATCHED
        assert robot.calls == []
        assert logger.levels() == ["ERROR"]

    @pytest.mark.parametrize(
        ("event_type", "payload", "method"),
        [
            ("Issue", issue_comment_payload(), "handle_issue_comment_event"),
            ("MergeRequest", merge_comment_payload(), "handle_merge_comment_event"),
        ],
    )
    def test_comment_deliveries_route_by_noteable_type(
        self,
        event_type: str,
        payload: dict[str, object],
        method: str,
    ) -> None:
        """Issue and merge request comments never cross-invoke."""
        robot = RecordingRobot()
        dispatcher = Dispatcher.for_robot(robot)
        log, _ = fake_context()

        dispatcher.route(event_type, encode(payload), log)

        assert robot.methods() == [method]

    def test_routing_twice_gives_independent_outcomes(self) -> None:
        """Identical deliveries are processed independently."""
        robot = RecordingRobot()
        dispatcher = Dispatcher.for_robot(robot)
        log, logger = fake_context(delivery="d-1")
        payload = encode(push_payload())

        first = dispatcher.route("Push Hook", payload, log)
        second = dispatcher.route("Push Hook", payload, log)

        assert first is second is RouteOutcome.DISPATCHED
        assert len(robot.calls) == 2
        assert robot.calls[0].event == robot.calls[1].event
        assert robot.calls[0].log == robot.calls[1].log
        assert robot.calls[0].event is not robot.calls[1].event
        assert logger.records[0].message == logger.records[1].message
        assert dict(log.fields) == {"delivery": "d-1"}

    def test_route_delivery(self) -> None:
        """A ``Delivery`` routes like its unpacked fields."""
        robot = RecordingRobot()
        dispatcher = Dispatcher.for_robot(robot)
        log, _ = fake_context()

        outcome = dispatcher.route_delivery(
            Delivery(event_type="Issue Hook", payload=encode(issue_payload()), log=log)
        )

        assert outcome is RouteOutcome.DISPATCHED
        assert robot.methods() == ["handle_issue_event"]

    def test_concurrent_routes_do_not_share_context(self) -> None:
        """Parallel deliveries each see only their own enrichment."""
        robot = PushOnlyRobot()
        dispatcher = Dispatcher.for_robot(robot)
        base, _ = fake_context()
        heads = [f"sha{index}" for index in range(32)]

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(
                pool.map(
                    lambda head: dispatcher.route(
                        "Push Hook", encode(push_payload(after=head)), base
                    ),
                    heads,
                )
            )

        assert set(outcomes) == {RouteOutcome.DISPATCHED}
        for call in robot.calls:
            assert isinstance(call.event, PushEvent)
            assert call.log.fields["head"] == call.event.after
        assert sorted(call.log.fields["head"] for call in robot.calls) == sorted(heads)


class TestResolveEventType:
    """Tests for ``resolve_event_type``."""

    @pytest.mark.parametrize(
        ("header", "payload", "expected"),
        [
            ("Push Hook", b"{}", "Push Hook"),
            ("Issue Hook", b"garbage", "Issue Hook"),
            ("Confidential Issue Hook", encode(issue_payload()), "Issue Hook"),
            ("Note Hook", encode(issue_comment_payload()), "Issue"),
            ("Note Hook", encode(merge_comment_payload()), "MergeRequest"),
            ("Confidential Note Hook", encode(issue_comment_payload()), "Issue"),
            ("Note Hook", _note_on(NoteableType.COMMIT), "Commit"),
            ("Note Hook", _note_on(NoteableType.SNIPPET), "Snippet"),
            ("Note Hook", b"{", "Note Hook"),
            ("Note Hook", b"{}", "Note Hook"),
            ("Note Hook", b'{"object_attributes": null}', "Note Hook"),
            (
                "Note Hook",
                b'{"object_attributes": {"noteable_type": null}}',
                "Note Hook",
            ),
        ],
    )
    def test_resolve_event_type(
        self, header: str, payload: bytes, expected: str
    ) -> None:
        """Note deliveries resolve to their noteable type."""
        assert resolve_event_type(header, payload) == expected

    @pytest.mark.parametrize(
        "noteable", [NoteableType.COMMIT, NoteableType.SNIPPET], ids=str
    )
    def test_unrouted_noteables_have_no_handler(self, noteable: NoteableType) -> None:
        """Comments on commits and snippets resolve to keys no robot can register."""
        dispatcher = Dispatcher.for_robot(RecordingRobot())
        log, _ = fake_context()
        payload = _note_on(noteable)

        outcome = dispatcher.route(
            resolve_event_type("Note Hook", payload), payload, log
        )

        assert outcome is RouteOutcome.NO_HANDLER_REGISTERED

    def test_confidential_issues_reach_the_issue_handler(self) -> None:
        """Confidential issue deliveries share the issue route."""
        robot = RecordingRobot()
        dispatcher = Dispatcher.for_robot(robot)
        log, _ = fake_context()
        payload = encode(issue_payload())

        outcome = dispatcher.route(
            resolve_event_type("Confidential Issue Hook", payload), payload, log
        )

        assert outcome is RouteOutcome.DISPATCHED
        assert robot.methods() == ["handle_issue_event"]
