from hyprutils.edges import Edge, Edges


def test_default_is_empty():
    edges = Edges()
    assert edges == Edge.NONE
    assert not (edges.top or edges.left or edges.bottom or edges.right)


def test_queries_match_flags():
    edges = Edges(Edge.TOP | Edge.RIGHT)
    assert edges.top is True
    assert edges.right is True
    assert edges.left is False
    assert edges.bottom is False


def test_setters_round_trip():
    edges = Edges()
    edges.left = True
    edges.bottom = True
    assert edges == Edges(Edge.LEFT | Edge.BOTTOM)
    edges.left = False
    assert edges == Edges(Edge.BOTTOM)
    edges.bottom = True
    assert edges == Edges(Edge.BOTTOM)


def test_or_and_xor():
    a = Edges(Edge.TOP | Edge.LEFT)
    b = Edges(Edge.LEFT | Edge.RIGHT)
    assert (a | b) == Edges(Edge.TOP | Edge.LEFT | Edge.RIGHT)
    assert (a & b) == Edges(Edge.LEFT)
    assert (a ^ b) == Edges(Edge.TOP | Edge.RIGHT)


def test_xor_with_self_is_empty():
    a = Edges(Edge.TOP | Edge.BOTTOM)
    assert (a ^ a) == Edges(Edge.NONE)


def test_in_place_operators():
    edges = Edges(Edge.TOP)
    edges |= Edges(Edge.BOTTOM)
    assert edges.top and edges.bottom
    edges &= Edges(Edge.BOTTOM)
    assert edges == Edges(Edge.BOTTOM)
    edges ^= Edges(Edge.BOTTOM)
    assert edges == Edges()


def test_operators_do_not_mutate_operands():
    a = Edges(Edge.TOP)
    b = Edges(Edge.LEFT)
    _ = a | b
    assert a == Edges(Edge.TOP)
    assert b == Edges(Edge.LEFT)


def test_equality_with_unrelated_type_is_false():
    assert (Edges(Edge.TOP) == "top") is False