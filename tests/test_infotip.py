from tourmap.infotip import InfoTip


def test_show_text_wraps_in_styled_div():
    tip = InfoTip()
    tip.show_text("42 m")
    assert tip.html == (
        '<div style="background-color: white; color: black; font-size: 20px">'
        "42 m</div>"
    )
    assert tip.visible is True


def test_hide_then_show_restores_visibility():
    tip = InfoTip()
    tip.hide()
    assert tip.visible is False
    tip.show_text("Lake<br><br>Quiet")
    assert tip.visible is True
    assert "Lake<br><br>Quiet" in tip.html


def test_show_at_offsets_position():
    tip = InfoTip()
    tip.show_at(100, 50)
    assert tip.pos == (100 + InfoTip.OFFSET, 50 + InfoTip.OFFSET)
    tip.show_at(-3.5, 0)
    assert tip.pos == (-3.5 + InfoTip.OFFSET, InfoTip.OFFSET)


def test_show_at_keeps_text_and_visibility():
    tip = InfoTip()
    tip.show_text("x")
    html = tip.html
    tip.show_at(1, 2)
    assert tip.html == html
    assert tip.visible is True
    assert tip.Z_VALUE > 0