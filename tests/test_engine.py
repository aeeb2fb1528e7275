import pytest
from payout.payouts.engine import PayoutEngine, PayoutRequest
from payout.tax.schedule import FeeSchedule, DEFAULT_SCHEDULE

@pytest.mark.parametrize("dest", ["NGN","USD","EUR"])
@pytest.mark.parametrize("gross", [0.01, 1.0, 123.45, 1000.0, 98765.4321])
def test_after_tax_and_fees(gross, dest):
    e=PayoutEngine()
    b=e.compute(PayoutRequest(gross,dest),fx_rate=1.0)
    rate=DEFAULT_SCHEDULE.withholding_rate(dest)
    assert b.after_tax==pytest.approx(gross*(1-rate))
    assert b.after_fees==pytest.approx(b.after_tax*0.9975-2.25)
    assert b.local_amount==pytest.approx(b.after_fees)

def test_usd_end_to_end():
    b=PayoutEngine().compute(PayoutRequest(1000.0,"USD"),1.0)
    assert b.withholding_rate==0.15
    assert b.withheld_tax==pytest.approx(150.0)
    assert b.after_tax==pytest.approx(850.0)
    assert b.fixed_fee==2.25
    assert b.border_fee==pytest.approx(2.125)
    assert b.after_fees==pytest.approx(845.625)
    assert b.local_amount==pytest.approx(845.625)

def test_ngn_end_to_end():
    b=PayoutEngine().compute(PayoutRequest(500.0,"NGN"),1500.0)
    assert b.withheld_tax==pytest.approx(150.0)
    assert b.after_tax==pytest.approx(350.0)
    assert b.border_fee==pytest.approx(0.875)
    assert b.after_fees==pytest.approx(346.875)
    assert b.local_amount==pytest.approx(520312.5)

def test_conversion_uses_full_rate():
    b=PayoutEngine().compute(PayoutRequest(500.0,"EUR"),0.923456)
    assert b.local_amount==pytest.approx(b.after_fees*0.923456)

def test_compute_is_idempotent():
    e=PayoutEngine()
    req=PayoutRequest(250.0,"EUR")
    assert e.compute(req,0.91)==e.compute(req,0.91)

def test_small_gross_goes_negative():
    b=PayoutEngine().compute(PayoutRequest(1.0,"USD"),1.0)
    assert b.after_fees<0

def test_substitute_schedule():
    sched=FeeSchedule(withholding_rates={"USD":0.0},fixed_fee=0.0,border_fee_rate=0.0)
    b=PayoutEngine(sched).compute(PayoutRequest(100.0,"USD"),1.0)
    assert b.local_amount==100.0

def test_breakdown_is_frozen():
    b=PayoutEngine().compute(PayoutRequest(100.0,"USD"),1.0)
    with pytest.raises(AttributeError):
        b.gross=5.0

def test_is_finite():
    e=PayoutEngine()
    assert e.compute(PayoutRequest(100.0,"USD"),1.0).is_finite()
    assert not e.compute(PayoutRequest(1e308,"NGN"),1500.0).is_finite()
