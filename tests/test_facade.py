from patternbook.facade import Inventory, OrderFacade, Payment, Shipping, main


def test_subsystems(capsys):
    assert Inventory().update_stock() == "Inventory: Stock updated."
    assert Payment().process_payment() == "Payment: Payment processed successfully."
    assert Shipping().arrange_shipping() == "Shipping: Shipping arranged."
    assert len(capsys.readouterr().out.splitlines()) == 3


def test_place_order_sequence(capsys):
    lines = OrderFacade().place_order()
    assert lines == [
        "--- Placing Order ---",
        "Inventory: Stock updated.",
        "Payment: Payment processed successfully.",
        "Shipping: Shipping arranged.",
        "--- Order Completed ---",
    ]
    assert capsys.readouterr().out.splitlines() == lines


def test_main_matches_place_order(capsys):
    assert main() == 0
    from_main = capsys.readouterr().out
    OrderFacade().place_order()
    assert capsys.readouterr().out == from_main