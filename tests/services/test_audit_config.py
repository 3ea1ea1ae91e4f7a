import pytest

from siteaudit.exceptions import ConfigNotFoundError
from siteaudit.services.audit_config_parser import AuditConfigParser
from siteaudit.services.config_file_store import ConfigFileStore
from siteaudit.services.config_service import ConfigService


def test_parser_applies_defaults_and_name_from_filename():
    cfg = AuditConfigParser().parse(config_path='shop.yml', data={'url': 'https://shop.example.com'})
    assert cfg.name == 'shop'
    assert cfg.config_path == 'shop.yml'
    assert cfg.crawl.max_depth == 3
    assert cfg.crawl.max_pages == 100
    assert cfg.crawl.respect_robots_txt is True
    assert cfg.crawl.rate_limit_ms == 1000
    assert cfg.link_check.include_external is False
    assert cfg.link_check.rate_limit_ms == 500


def test_parser_reads_link_check_section():
    data = {
        'name': 'docs',
        'url': 'https://docs.example.com',
        'max_depth': 2,
        'robots': False,
        'link_check': {'include_external': True, 'external_timeout_ms': 4000, 'urls': ['https://docs.example.com/x']},
    }
    cfg = AuditConfigParser().parse(config_path='docs.yaml', data=data)
    assert cfg.crawl.max_depth == 2
    assert cfg.crawl.respect_robots_txt is False
    assert cfg.link_check.include_external is True
    assert cfg.link_check.external_timeout_ms == 4000
    assert cfg.link_check.urls == ('https://docs.example.com/x',)


@pytest.mark.parametrize('data', [
    {},
    {'url': 'https://example.com', 'max_depth': 0},
    {'url': 'https://example.com', 'max_pages': 501},
    {'url': 'https://example.com', 'link_check': 'yes'},
])
def test_parser_rejects_invalid_profiles(data):
    assert AuditConfigParser().parse(config_path='bad.yml', data=data) is None


def test_service_lists_and_resolves_profiles(tmp_path):
    (tmp_path / 'a.yml').write_text('name: alpha\nurl: https://alpha.example.com\n')
    (tmp_path / 'b.yaml').write_text('url: https://beta.example.com\nmax_pages: 10\n')
    (tmp_path / 'broken.yml').write_text('url: [unterminated\n')
    (tmp_path / 'notes.txt').write_text('ignored')
    service = ConfigService(ConfigFileStore(configs_dir=str(tmp_path)))

    assert [c.name for c in service.list_configs()] == ['alpha', 'b']
    assert service.get_config('alpha').crawl.url == 'https://alpha.example.com'
    assert service.get_config('b.yaml').crawl.max_pages == 10
    with pytest.raises(ConfigNotFoundError):
        service.get_config('missing')


def test_missing_configs_dir_lists_nothing(tmp_path):
    store = ConfigFileStore(configs_dir=str(tmp_path / 'nope'))
    assert store.list_config_files() == []
    assert store.load_yaml_dict('x.yml') is None
