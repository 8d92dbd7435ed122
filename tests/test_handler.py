from dissent.handler import EventHandler, MainLoop, MainThreadHandler


class MessageCreate:
    def __init__(self, content):
        self.content = content


class Typing:
    pass


def test_dispatch_calls_matching_handler():
    h = EventHandler()
    seen = []
    h.add_handler(seen.append, MessageCreate)
    event = MessageCreate("hi")
    h.dispatch(event)
    assert seen == [event]


def test_type_filter_skips_other_events():
    h = EventHandler()
    seen = []
    h.add_handler(seen.append, MessageCreate)
    h.dispatch(Typing())
    assert seen == []


def test_untyped_handler_receives_everything():
    h = EventHandler()
    seen = []
    h.add_handler(seen.append)
    h.dispatch(Typing())
    h.dispatch(MessageCreate("x"))
    assert len(seen) == 2


def test_remove_handler():
    h = EventHandler()
    seen = []
    remove = h.add_handler(seen.append)
    remove()
    remove()
    h.dispatch(Typing())
    assert seen == []


def test_callers_for_keeps_order():
    h = EventHandler()
    first, second = (lambda e: None), (lambda e: None)
    h.add_handler(first)
    h.add_handler(second, Typing)
    assert h.callers_for(Typing()) == [first, second]
    assert h.callers_for(MessageCreate("x")) == [first]


def test_main_loop_runs_in_order_and_defers_new_work():
    loop = MainLoop()
    order = []
    loop.idle_add(lambda: order.append(1))
    loop.idle_add(lambda: (order.append(2), loop.idle_add(lambda: order.append(3))))
    assert loop.run_pending() == 2
    assert order == [1, 2]
    assert loop.run_pending() == 1
    assert order == [1, 2, 3]
    assert loop.run_pending() == 0


def test_main_thread_handler_defers_delivery():
    source, loop = EventHandler(), MainLoop()
    m = MainThreadHandler(source, loop)
    seen = []
    m.add_handler(seen.append, MessageCreate)
    event = MessageCreate("hello")
    source.dispatch(event)
    assert seen == []
    assert loop.run_pending() == 1
    assert seen == [event]


def test_main_thread_handler_schedules_nothing_without_callers():
    source, loop = EventHandler(), MainLoop()
    m = MainThreadHandler(source, loop)
    m.add_handler(lambda e: None, MessageCreate)
    source.dispatch(Typing())
    assert loop.run_pending() == 0


def test_callers_snapshot_at_event_time():
    source, loop = EventHandler(), MainLoop()
    m = MainThreadHandler(source, loop)
    seen = []
    remove = m.add_handler(seen.append)
    source.dispatch(Typing())
    remove()
    loop.run_pending()
    assert len(seen) == 1
    source.dispatch(Typing())
    assert loop.run_pending() == 0
    assert len(seen) == 1


def test_add_sync_handler_is_add_handler():
    source, loop = EventHandler(), MainLoop()
    m = MainThreadHandler(source, loop)
    seen = []
    remove = m.add_sync_handler(seen.append, Typing)
    event = Typing()
    source.dispatch(event)
    loop.run_pending()
    assert seen == [event]
    remove()
    source.dispatch(Typing())
    assert loop.run_pending() == 0