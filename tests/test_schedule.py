import pytest
from payout.tax.schedule import FeeSchedule, DEFAULT_SCHEDULE

def test_default_rates():
    s=DEFAULT_SCHEDULE
    assert s.withholding_rate("NGN")==0.30
    assert s.withholding_rate("USD")==0.15
    assert s.withholding_rate("EUR")==0.15
    assert s.fixed_fee==2.25 and s.border_fee_rate==0.0025
    assert set(s.supported)=={"NGN","USD","EUR"}

def test_locales():
    s=DEFAULT_SCHEDULE
    assert s.locale_for("NGN")=="en_NG"
    assert s.locale_for("EUR")=="de_DE"
    assert s.locale_for("USD")=="en_US"

def test_schedule_cannot_be_mutated():
    rates={"USD":0.1}
    s=FeeSchedule(withholding_rates=rates)
    rates["USD"]=0.9
    assert s.withholding_rate("USD")==0.1
    with pytest.raises(TypeError):
        s.withholding_rates["USD"]=0.5
    with pytest.raises(AttributeError):
        s.fixed_fee=1.0
