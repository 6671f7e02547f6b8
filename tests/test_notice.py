# tests/test_notice.py
from shopfront.shell import ERROR, SUCCESS, NoticeSlot


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_notice_expires_after_ttl():
    clock = FakeClock()
    slot = NoticeSlot(ttl=5, clock=clock)
    assert slot.current() is None

    slot.post("Order placed successfully!", SUCCESS)
    clock.now += 4.9
    assert slot.current().message == "Order placed successfully!"
    clock.now += 0.1
    assert slot.current() is None


def test_new_notice_replaces_and_restarts_timer():
    clock = FakeClock()
    slot = NoticeSlot(ttl=5, clock=clock)
    slot.post("first")
    clock.now += 4
    slot.post("Cart is empty!", ERROR)
    clock.now += 4
    notice = slot.current()
    assert notice.message == "Cart is empty!"
    assert notice.severity == ERROR
    clock.now += 1
    assert slot.current() is None
