import pytest

from metagems.erasure import (
    AllCapsPrinter,
    Erased,
    ForwardPrinter,
    Interface,
    MethodNotImplementedError,
    PRINTER_INTERFACE,
    ReversePrinter,
)


class Counter:
    def __init__(self, start=0):
        self.count = start

    def bump(self):
        self.count += 1
        return self.count


COUNTER = Interface(["bump"])


def test_allcaps_print(capsys):
    a = Erased.construct(PRINTER_INTERFACE, AllCapsPrinter)
    a.print("Hello a")
    assert capsys.readouterr().out == "HELLO A\n"


def test_forward_print(capsys):
    d = Erased.construct(PRINTER_INTERFACE, ForwardPrinter)
    d.print("Hello d")
    assert capsys.readouterr().out == "Hello d\n"


def test_reverse_print(capsys):
    e = Erased.construct(PRINTER_INTERFACE, ReversePrinter)
    e.print("Hello e")
    assert capsys.readouterr().out == "Hello e"[::-1] + "\n"


def test_copy_keeps_behaviour(capsys):
    a = Erased.construct(PRINTER_INTERFACE, AllCapsPrinter)
    b = a.copy()
    b.print("Hello b")
    assert capsys.readouterr().out == "HELLO B\n"
    assert type(b.concrete) is AllCapsPrinter
    assert b.concrete is not a.concrete


def test_copy_is_independent():
    a = Erased.construct(COUNTER, Counter, 5)
    b = a.copy()
    assert a.bump() == 6
    assert a.bump() == 7
    assert b.bump() == 6


def test_has_optional_method():
    assert Erased.construct(PRINTER_INTERFACE, ForwardPrinter).has("save") is True
    assert Erased.construct(PRINTER_INTERFACE, AllCapsPrinter).has("save") is False


def test_has_required_method_true_even_when_empty():
    assert Erased(PRINTER_INTERFACE).has("print") is True


def test_has_unknown_method():
    with pytest.raises(AttributeError):
        Erased.construct(PRINTER_INTERFACE, ForwardPrinter).has("close")


def test_missing_optional_method_raises():
    e = Erased.construct(PRINTER_INTERFACE, ReversePrinter)
    with pytest.raises(MethodNotImplementedError) as info:
        e.save("bar.save", "w")
    assert str(info.value) == "ReversePrinter::save not implemented"
    assert info.value.method == "save"


def test_present_optional_method_forwards(capsys):
    d = Erased.construct(PRINTER_INTERFACE, ForwardPrinter)
    d.save("foo.save", "w")
    assert "save" in capsys.readouterr().out


def test_missing_required_method_rejected():
    with pytest.raises(TypeError):
        Erased(PRINTER_INTERFACE, Counter())


def test_all_methods_required_by_default():
    iface = Interface(["print", "save"])
    assert iface.required == frozenset({"print", "save"})
    with pytest.raises(TypeError):
        Erased(iface, ReversePrinter())


def test_empty_value():
    c = Erased(PRINTER_INTERFACE)
    assert not c
    assert Erased(PRINTER_INTERFACE).copy().concrete is None
    with pytest.raises(LookupError):
        c.print("Hello c")


def test_truthiness_tracks_content():
    values = [
        Erased(PRINTER_INTERFACE),
        Erased.construct(PRINTER_INTERFACE, ForwardPrinter),
    ]
    assert [bool(v) for v in values] == [False, True]


def test_unknown_attribute():
    d = Erased.construct(PRINTER_INTERFACE, ForwardPrinter)
    with pytest.raises(AttributeError):
        d.close()


def test_interface_validation():
    with pytest.raises(ValueError):
        Interface(["print"], required=["save"])
    with pytest.raises(ValueError):
        Interface(["print", "print"])
    with pytest.raises(ValueError):
        Interface(["not a name"])


def test_interface_method_order():
    iface = Interface(["print", "save"], required=["print"])
    assert iface.methods == ("print", "save")
    assert iface.required == frozenset({"print"})
    assert PRINTER_INTERFACE.methods == ("print", "save")