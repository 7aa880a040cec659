"""Simple wrecked_radio demo / smoke test."""

from __future__ import annotations

from .errors import NoHandlerError
from .radio import WreckedRadio


def main() -> None:
    radio = WreckedRadio()
    channel = radio.channel("users")
    assert radio.channel("users") is channel

    print("[demo] testing pub/sub")
    log: list[str] = []
    unsubscribe = channel.on("login", lambda user: log.append(user["name"]))
    channel.trigger("login", {"name": "A"})
    channel.trigger("login", {"name": "B"})
    assert log == ["A", "B"]
    unsubscribe()
    unsubscribe()
    channel.trigger("login", {"name": "C"})
    assert log == ["A", "B"]
    channel.trigger("nobody-listens")
    print("[demo] pub/sub ok")

    print("[demo] testing request/reply")
    channel.reply("greet", lambda user: f"hi {user['name']}")
    assert channel.request("greet", {"name": "Mark"}) == "hi Mark"
    channel.reply("greet", lambda user: f"hello {user['name']}")
    assert channel.request("greet", {"name": "Mark"}) == "hello Mark"
    print("[demo] request/reply ok")

    print("[demo] testing missing handler")
    channel.stop_replying("greet").stop_replying("greet")
    try:
        channel.request("greet", {"name": "Mark"})
    except NoHandlerError as exc:
        assert exc.request_name == "greet"
    else:
        raise SystemExit("request without handler did not fail")
    print("[demo] missing handler ok")
    print("[demo] wrecked radio demo complete")


if __name__ == "__main__":
    main()
