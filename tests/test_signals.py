from hyprutils.signals import Signal, SignalListener, StaticSignalListener


def test_listener_called_then_unregistered_when_dropped():
    signal = Signal()
    received = []

    listener = signal.register_listener(received.append)
    assert isinstance(listener, SignalListener)
    signal.emit(1)
    assert received == [1]

    del listener
    signal.emit(2)
    assert received == [1]


def test_listener_receives_data():
    signal = Signal()
    received = []
    listener = signal.register_listener(received.append)
    signal.emit("payload")
    signal.emit(42)
    assert received == ["payload", 42]
    assert listener is not None and received[-1] == 42


def test_static_listener_receives_owner_and_data():
    signal = Signal()
    received = []
    owner = object()
    signal.register_static_listener(lambda o, d: received.append((o, d)), owner)
    signal.emit("x")
    assert received == [(owner, "x")]


def test_listener_dropped_during_emit_is_skipped():
    signal = Signal()
    calls = []
    holder = {}

    def first(_):
        calls.append("first")
        holder.clear()

    keep_first = signal.register_listener(first)
    holder["second"] = signal.register_listener(lambda _: calls.append("second"))

    signal.emit()
    assert calls == ["first"]
    assert keep_first is not None and len(holder) == 0


def test_listeners_run_before_statics_in_registration_order():
    signal = Signal()
    order = []
    signal.register_static_listener(lambda o, d: order.append("static"), None)
    a = signal.register_listener(lambda d: order.append("a"))
    b = signal.register_listener(lambda d: order.append("b"))
    signal.emit()
    assert order == ["a", "b", "static"]
    assert a is not b


def test_signal_listener_without_handler_does_nothing():
    listener = SignalListener(None)
    listener.emit("data")
    direct = []
    SignalListener(direct.append).emit("data")
    assert direct == ["data"]


def test_static_signal_listener_emit():
    received = []
    StaticSignalListener(lambda o, d: received.append((o, d)), "owner").emit("d")
    assert received == [("owner", "d")]