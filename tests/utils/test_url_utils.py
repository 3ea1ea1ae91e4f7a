from siteaudit.utils.url_utils import (
    canonicalize_url,
    extract_domain,
    is_same_domain,
    is_valid_url,
    normalize_url,
    origin_of,
    path_of,
)


def test_absolute_path_resolves_against_origin():
    assert normalize_url('/about', 'https://example.com/page/') == 'https://example.com/about'


def test_relative_path_resolves_against_base_directory():
    assert normalize_url('contact', 'https://example.com/page/') == 'https://example.com/page/contact'


def test_parent_segments_collapse():
    assert normalize_url('../about', 'https://example.com/page/subpage/') == 'https://example.com/page/about'


def test_absolute_urls_pass_through_unchanged():
    assert normalize_url('https://other.com/x?y=1#z', 'https://example.com/') == 'https://other.com/x?y=1#z'
    assert normalize_url('http://example.com/a') == 'http://example.com/a'


def test_fragment_and_query_append_to_base():
    assert normalize_url('#top', 'https://example.com/page') == 'https://example.com/page#top'
    assert normalize_url('?id=1', 'https://example.com/page') == 'https://example.com/page?id=1'


def test_unresolvable_input_returned_unchanged():
    assert normalize_url('contact') == 'contact'
    assert normalize_url('contact', 'not a url') == 'contact'
    assert normalize_url('mailto:a@example.com', 'https://example.com/') == 'mailto:a@example.com'


def test_canonicalize_lowercases_host_and_drops_fragment():
    assert canonicalize_url('HTTPS://Example.COM/Path?q=1#frag') == 'https://example.com/Path?q=1'
    assert canonicalize_url('https://example.com') == 'https://example.com/'


def test_same_domain_is_exact_hostname_match():
    assert is_same_domain('https://example.com/a', 'http://example.com/b')
    assert not is_same_domain('https://www.example.com/', 'https://example.com/')
    assert not is_same_domain('https://blog.example.com/', 'https://example.com/')


def test_same_domain_fails_closed_for_invalid_urls():
    assert not is_same_domain('example.com', 'https://example.com/')
    assert not is_same_domain('https://example.com/', '')


def test_extract_domain_strips_www():
    assert extract_domain('https://www.example.com/page') == 'example.com'
    assert extract_domain('nonsense') == 'unknown-domain'


def test_origin_and_path():
    assert origin_of('https://example.com:8443/a/b?c') == 'https://example.com:8443'
    assert path_of('https://example.com') == '/'
    assert path_of('/relative') is None


def test_is_valid_url():
    assert is_valid_url('https://example.com')
    assert not is_valid_url('not a url')
