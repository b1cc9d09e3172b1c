from apitester.models import ResponseFailure, ResponseSuccess, TestResult
from apitester.services.report_service import ReportService
from apitester.stores.report_store import ReportStore

TestResult.__test__ = False


def test_generate_prints_each_result_and_summary(tmp_path, console):
    store = ReportStore(tmp_path / "report.json")
    store.save(
        [
            TestResult(name="list users", passed=True, result=ResponseSuccess(status=200)),
            TestResult(
                name="[admin] delete",
                passed=False,
                result=ResponseFailure(error="getaddrinfo ENOTFOUND"),
            ),
        ]
    )

    summary = ReportService(store=store, console=console).generate()

    assert summary.total == 2
    assert summary.passed == 1
    assert summary.failed == 1
    output = console.file.getvalue()
    assert output.splitlines() == [
        "Test Report:",
        "list users: Passed",
        "Status: 200",
        "[admin] delete: Failed",
        "Status: N/A",
        "Error: getaddrinfo ENOTFOUND",
        "Total: 2, Passed: 1",
    ]


def test_generate_twice_prints_identical_output(tmp_path, console):
    store = ReportStore(tmp_path / "report.json")
    store.save([TestResult(name="t1", passed=True, result=ResponseSuccess(status=204))])
    service = ReportService(store=store, console=console)

    service.generate()
    first = console.file.getvalue()
    service.generate()

    assert console.file.getvalue() == first * 2


def test_missing_report_prints_empty_summary(tmp_path, console):
    summary = ReportService(
        store=ReportStore(tmp_path / "absent.json"), console=console
    ).generate()

    assert summary.total == 0
    assert console.file.getvalue().splitlines() == ["Test Report:", "Total: 0, Passed: 0"]
