import io

import pytest

from judgekit import verdicts


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert verdicts.main(argv) == 0
    return capsys.readouterr().out


def test_btryhlth_threshold():
    assert verdicts.btryhlth(80) == "YES"
    assert verdicts.btryhlth(79) == "NO"


@pytest.mark.parametrize(
    "x, y, expected", [(5, 8, "PROFIT"), (8, 5, "LOSS"), (6, 6, "NEUTRAL")]
)
def test_bullbear(x, y, expected):
    assert verdicts.bullbear(x, y) == expected


def test_candivide():
    assert verdicts.candivide(9) == "YES"
    assert verdicts.candivide(10) == "NO"


def test_cbspeed_strict():
    assert verdicts.cbspeed(3, 4) == "YES"
    assert verdicts.cbspeed(4, 4) == "NO"


def test_chefondate_lowercase():
    assert verdicts.chefondate(5, 5) == "yes"
    assert verdicts.chefondate(5, 6) == "no"


def test_enspace():
    assert verdicts.enspace(5, 1, 2) == "YES"
    assert verdicts.enspace(4, 1, 2) == "NO"


def test_fourtickets_boundary():
    assert verdicts.fourtickets(250) == "YES"
    assert verdicts.fourtickets(251) == "NO"


def test_giant_boundary():
    assert verdicts.giant(60) == "Yes"
    assert verdicts.giant(59) == "No"


def test_jerrychase_strict():
    assert verdicts.jerrychase(2, 3) == "YES"
    assert verdicts.jerrychase(3, 3) == "NO"


def test_minheight():
    assert verdicts.minheight(120, 120) == "YES"
    assert verdicts.minheight(119, 120) == "NO"


def test_morningrun_boundary():
    assert verdicts.morningrun(250, 250) == "YES"
    assert verdicts.morningrun(250, 249) == "NO"


@pytest.mark.parametrize(
    "args, expected",
    [((3, 0, 1, 1), "Messi"), ((1, 1, 3, 0), "Ronaldo"), ((1, 0, 0, 2), "Equal")],
)
def test_mvr(args, expected):
    assert verdicts.mvr(*args) == expected


@pytest.mark.parametrize(
    "x, expected",
    [(0, "GOLD"), (2, "GOLD"), (3, "SILVER"), (5, "SILVER"), (6, "BRONZE")],
)
def test_octathon(x, expected):
    assert verdicts.octathon(x) == expected


def test_par2():
    assert verdicts.par2(4) == "Yes"
    assert verdicts.par2(7) == "No"


def test_r5s_boundary():
    assert verdicts.r5s(1000, 1000) == "YES"
    assert verdicts.r5s(1000, 999) == "NO"


def test_rcbcsk_boundary():
    assert verdicts.rcbcsk(38, 20) == "RCB"
    assert verdicts.rcbcsk(37, 20) == "CSK"


def test_rightthere():
    assert verdicts.rightthere(3, 3) == "YES"
    assert verdicts.rightthere(4, 3) == "NO"


def test_subscribe_strict():
    assert verdicts.subscribe(31) == "YES"
    assert verdicts.subscribe(30) == "NO"


def test_summ():
    assert verdicts.summ(2, 3, 5) == "YES"
    assert verdicts.summ(2, 3, 6) == "NO"


def test_val114():
    assert verdicts.val114(121) == "Likely"
    assert verdicts.val114(120) == "Unlikely"


def test_main_multi_case(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, ["btryhlth"], "3\n80\n79\n100\n")
    assert out == "YES\nNO\nYES\n"


def test_main_single_case_without_newline(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, ["giant"], "60")
    assert out == "Yes"


def test_main_single_case_with_newline(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, ["morningrun"], "250 250")
    assert out == "YES\n"


def test_main_unknown_problem():
    with pytest.raises(SystemExit):
        verdicts.main(["nosuchproblem"])