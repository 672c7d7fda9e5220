import pytest

import main


@pytest.fixture
def argv(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    def set_argv(*args):
        monkeypatch.setattr(main.sys, 'argv', ['main.py', *args])

    return set_argv


def test_parse_args_maps_flags_to_env(argv):
    argv('--browser', 'firefox', '--base-url', 'https://shop.test', '--headed', '--no-screenshots', '--video')

    assert main.parse_args() == {
        'BROWSER': 'firefox',
        'BASE_URL': 'https://shop.test',
        'HEADLESS': 'false',
        'SCREENSHOT_ON_FAILURE': 'false',
        'RECORD_VIDEO': 'true',
    }


def test_parse_args_without_flags_leaves_env_alone(argv):
    argv()
    assert main.parse_args() == {}


@pytest.mark.parametrize('args', [('--browser',), ('--browser', '--headed')])
def test_value_flag_without_value_is_ignored(argv, args):
    argv(*args)

    env = main.parse_args()

    assert 'BROWSER' not in env


def test_pytest_args_select_e2e_and_pass_tags_as_keyword(argv, tmp_path):
    argv('--tags', 'desktop or phone')

    args = main.pytest_args()

    assert args[:3] == ['tests/step_defs', '-m', 'e2e']
    assert '--cucumberjson=reports/cucumber-report.json' in args
    assert args[-2:] == ['-k', 'desktop or phone']
    assert (tmp_path / 'reports').is_dir()


def test_pytest_args_without_tags(argv):
    argv('--tags')
    assert '-k' not in main.pytest_args()
