"""
Wspólne fixture i hooki pytest.

Scenariusze BDD (features/*.feature, tag @e2e) dostają:
  - jedną sesję przeglądarki na cały run (browser_session)
  - świeży PageRegistry na scenariusz (pages) - karta zamykana po scenariuszu
  - screenshot przy porażce, jeśli SCREENSHOT_ON_FAILURE
  - wpis w reports/run-report.json
"""
import logging
import platform
import time

import pytest

from core.browser_session import BrowserSession
from core.run_report import FAILED, PASSED, SKIPPED, RunReport, ScenarioResult
from core.settings import Settings
from scenarios.context import ScenarioContext
from scenarios.pages import PageRegistry

logger = logging.getLogger(__name__)


@pytest.fixture(scope='session')
def settings() -> Settings:
    return Settings.from_env()


@pytest.fixture(scope='session')
def run_report(settings):
    report = RunReport(settings.report_dir, metadata={
        'browser': settings.browser,
        'headless': settings.headless,
        'base_url': settings.base_url,
        'platform': platform.platform(),
        'python': platform.python_version(),
    })
    yield report
    if report.scenarios:
        report.write()


@pytest.fixture(scope='session')
def browser_session(settings):
    logger.info("Start wykonania")
    session = BrowserSession(settings)
    session.run(session.start())
    yield session
    session.shutdown()
    logger.info("Wykonanie zakończone")


@pytest.fixture
def pages(browser_session, settings, run_report) -> PageRegistry:
    page = browser_session.run(browser_session.acquire())
    yield PageRegistry(page, settings.base_url)
    browser_session.run(browser_session.release())


@pytest.fixture
def scenario_context(request, settings) -> ScenarioContext:
    return ScenarioContext(
        scenario_name=request.node.name,
        base_url=settings.base_url,
        fixture_dir=settings.fixture_dir,
    )


# ── Hooki ─────────────────────────────────────────────────────────────────────
# Kroki pytest-bdd pobierają fixture przez getfixturevalue, więc nie ma ich
# w item.funcargs. Sesja, raport i kontekst scenariusza idą przez stash węzła.
_started_at = pytest.StashKey[float]()
_recorded = pytest.StashKey[bool]()
_report_key = pytest.StashKey[RunReport]()
_session_key = pytest.StashKey[BrowserSession]()
_context_key = pytest.StashKey[ScenarioContext]()


@pytest.fixture(autouse=True)
def scenario_tracking(request):
    if request.node.get_closest_marker('e2e') is None:
        return
    # Raport najpierw: nieudany start przeglądarki też trafia do raportu
    request.node.stash[_report_key] = request.getfixturevalue('run_report')
    request.node.stash[_session_key] = request.getfixturevalue('browser_session')
    request.node.stash[_context_key] = request.getfixturevalue('scenario_context')


@pytest.hookimpl(tryfirst=True)
def pytest_runtest_setup(item):
    item.stash[_started_at] = time.monotonic()


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()

    run_report = item.stash.get(_report_key, None)
    if run_report is None or item.stash.get(_recorded, False):
        return

    # Wynik scenariusza: porażka w setup/call albo sukces po call
    if report.when == 'call' or (report.when == 'setup' and not report.passed):
        item.stash[_recorded] = True
        run_report.add(_scenario_result(item, report))


def _scenario_result(item, report) -> ScenarioResult:
    scenario = getattr(getattr(item, 'obj', None), '__scenario__', None)
    feature = getattr(getattr(scenario, 'feature', None), 'name', '')
    started = item.stash.get(_started_at, time.monotonic())

    if report.skipped:
        status = SKIPPED
    elif report.failed:
        status = FAILED
    else:
        status = PASSED

    context = item.stash.get(_context_key, None)
    result = ScenarioResult(
        name=getattr(scenario, 'name', item.name),
        feature=feature,
        status=status,
        duration=round(time.monotonic() - started, 2),
        error=str(report.longrepr)[-2000:] if report.failed else None,
        details=context.details() if context else {},
    )

    if status == FAILED:
        attachment = _failure_screenshot(item)
        if attachment:
            result.attachments.append(attachment)
    return result


def _failure_screenshot(item) -> str | None:
    session = item.stash.get(_session_key, None)
    if session is None or not session.settings.screenshot_on_failure:
        return None
    try:
        shot = session.run(session.screenshot(item.name))
    except Exception as e:
        logger.warning(f"Screenshot po porażce nieudany: {e}")
        return None
    return str(shot[0]) if shot else None
