from __future__ import annotations

from typing import Any, cast

import pytest
from werkzeug.wrappers import Response

from repoforms.actions import ContentActionDispatcher, FormActionEvent
from repoforms.errors import InvalidOptionsError


@pytest.mark.unit
def test_dispatch_without_receivers_has_no_response() -> None:
    dispatcher = ContentActionDispatcher()

    dispatcher.dispatch_form_action(cast(Any, object()), None, "publish")

    assert dispatcher.get_response() is None


@pytest.mark.unit
def test_generic_then_action_signal_receive_the_same_event(parent_location) -> None:
    dispatcher = ContentActionDispatcher()
    form = cast(Any, object())
    data = object()
    received: list[tuple[str, FormActionEvent]] = []
    response = Response("done", status=302)

    def on_any(sender, *, event):
        received.append(("any", event))

    def on_publish(sender, *, event):
        received.append(("publish", event))
        event.response = response

    dispatcher.signal().connect(on_any, weak=False)
    dispatcher.signal("publish").connect(on_publish, weak=False)
    dispatcher.dispatch_form_action(form, data, "publish", {"referrer_location": parent_location})

    assert [name for name, _ in received] == ["any", "publish"]
    event = received[0][1]
    assert event is received[1][1]
    assert event.form is form
    assert event.data is data
    assert event.action_name == "publish"
    assert event.options == {"referrer_location": parent_location}
    assert dispatcher.get_response() is response


@pytest.mark.unit
def test_receivers_are_scoped_to_their_dispatcher() -> None:
    listening = ContentActionDispatcher()
    other = ContentActionDispatcher()
    calls: list[object] = []

    def on_cancel(sender, *, event):
        calls.append(sender)
        event.response = Response("cancelled")

    listening.signal("cancel").connect(on_cancel, weak=False)
    other.dispatch_form_action(cast(Any, object()), None, "cancel")
    assert other.get_response() is None

    listening.dispatch_form_action(cast(Any, object()), None, "cancel")
    assert listening.get_response() is not None
    assert other.signal("cancel").receivers == {}

    assert calls == [listening]


@pytest.mark.unit
def test_response_is_reset_between_dispatches() -> None:
    dispatcher = ContentActionDispatcher()

    def on_publish(sender, *, event):
        event.response = Response("published")

    dispatcher.signal("publish").connect(on_publish, weak=False)
    dispatcher.dispatch_form_action(cast(Any, object()), None, "publish")
    assert dispatcher.get_response() is not None

    dispatcher.dispatch_form_action(cast(Any, object()), None, "save_draft")
    assert dispatcher.get_response() is None


@pytest.mark.unit
def test_unknown_options_are_rejected() -> None:
    dispatcher = ContentActionDispatcher()

    with pytest.raises(InvalidOptionsError) as exc_info:
        dispatcher.dispatch_form_action(cast(Any, object()), None, "publish", {"redirect": "/"})

    assert exc_info.value.extra["action"] == "publish"


@pytest.mark.unit
def test_signals_belong_to_each_dispatcher() -> None:
    first = ContentActionDispatcher()
    second = ContentActionDispatcher()

    assert first.signal("publish") is first.signal("publish")
    assert first.signal("publish") is not second.signal("publish")
    assert first.signal() is not first.signal("publish")
