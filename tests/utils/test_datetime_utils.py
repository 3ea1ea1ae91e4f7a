from datetime import datetime

from siteaudit.utils.datetime_utils import utc_now_iso


def test_utc_now_iso_uses_z_suffix_and_milliseconds():
    stamp = utc_now_iso()
    assert stamp.endswith('Z')
    assert len(stamp.split('.')[-1]) == 4
    parsed = datetime.fromisoformat(stamp.replace('Z', '+00:00'))
    assert parsed.utcoffset().total_seconds() == 0
