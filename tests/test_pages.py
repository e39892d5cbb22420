from pathlib import Path

from streamlit.testing.v1 import AppTest

ROOT = Path(__file__).resolve().parent.parent
PAGES = ROOT / "pages"


def _page(name: str) -> AppTest:
    return AppTest.from_file(str(PAGES / name), default_timeout=30)


def test_landing_page_renders():
    at = AppTest.from_file(str(ROOT / "app.py"), default_timeout=30).run()
    assert not at.exception
    assert "Moving Cost Estimator" in at.title[0].value


def test_estimate_page_shows_default_estimate():
    at = _page("1_🚚_Estimate.py").run()
    assert not at.exception
    assert [m.value for m in at.metric] == ["$860", "$0", "$688 – $1,118"]
    assert any("2 Bedroom • 50 miles" in c.value for c in at.caption)


def test_estimate_page_recomputes_on_change():
    at = _page("1_🚚_Estimate.py").run()
    at.number_input(key="distance").set_value(1000)
    at.selectbox(key="home_size").set_value("three_plus_bedroom")
    at.selectbox(key="move_type").set_value("long_distance")
    at.checkbox(key="packing_services").check()
    at.checkbox(key="storage_needed").check()
    at.run()
    assert not at.exception
    assert [m.value for m in at.metric] == ["$4,900", "$1,030", "$3,920 – $6,370"]


def test_compare_page_renders():
    at = _page("2_📊_Compare.py").run()
    assert not at.exception
    assert len(at.dataframe) >= 1


def test_bulk_page_waits_for_upload():
    at = _page("3_📦_Bulk.py").run()
    assert not at.exception
    assert not at.error
