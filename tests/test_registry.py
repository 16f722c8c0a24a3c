from conftest import make_peer

from slide_relay.server.registry import PeerRegistry


def test_register_and_len():
    reg = PeerRegistry()
    a, b = make_peer("A"), make_peer("B")
    reg.register(a)
    reg.register(b)
    assert len(reg) == 2
    assert a in reg and b in reg


def test_unregister_is_idempotent():
    reg = PeerRegistry()
    a = make_peer("A")
    reg.register(a)
    assert reg.unregister(a) is True
    assert reg.unregister(a) is False
    assert len(reg) == 0


def test_for_each_except_skips_sender():
    reg = PeerRegistry()
    peers = [make_peer(x) for x in "ABCD"]
    for p in peers:
        reg.register(p)
    seen = []
    n = reg.for_each_except(peers[1], seen.append)
    assert n == 3
    assert seen == [peers[0], peers[2], peers[3]]


def test_for_each_except_none_visits_all():
    reg = PeerRegistry()
    peers = [make_peer(x) for x in "AB"]
    for p in peers:
        reg.register(p)
    assert reg.for_each_except(None, lambda p: None) == 2


def test_iteration_tolerates_mutation_from_callback():
    reg = PeerRegistry()
    a, b, c = make_peer("A"), make_peer("B"), make_peer("C")
    for p in (a, b, c):
        reg.register(p)
    seen = []

    def visit(p):
        seen.append(p)
        reg.unregister(c)

    reg.for_each_except(None, visit)
    # membership is snapshotted when iteration starts
    assert seen == [a, b, c]
    assert c not in reg


def test_peers_compare_by_identity():
    a1, a2 = make_peer("A"), make_peer("A")
    reg = PeerRegistry()
    reg.register(a1)
    reg.register(a2)
    assert len(reg) == 2


def test_closed_peer_refuses_frames():
    p = make_peer("A")
    assert p.deliver("x") is True
    p.open = False
    assert p.deliver("y") is False
    assert p.outbox.qsize() == 1
