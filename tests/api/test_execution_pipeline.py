import threading
import pytest
from web_invoker.api import ExecutionPipeline, InterceptorRegistry, WebInvoker
from web_invoker.api.models import WebResponse
from web_invoker.exceptions import InvocationParameterException, TransportException
from tests.fixtures.interceptors import RecordingInterceptor, StubTransport


def test_no_response_when_transport_unreachable(unreachable_pipeline, unreachable_transport, mock_request):
    """Verifies that interceptors returning None leave a transport failure as an absent response."""
    interceptor = RecordingInterceptor(0)
    unreachable_pipeline.add_interceptor(interceptor)

    assert unreachable_pipeline.execute(mock_request) is None
    assert unreachable_transport.calls == 1

    response, failure = interceptor.after_calls[0]
    assert response is None
    assert isinstance(failure, TransportException)


def test_before_hook_short_circuits_transport(unreachable_pipeline, unreachable_transport, mock_request,
                                              hello_world_response):
    """Verifies that a response from a before-hook is returned as-is and the transport is never invoked."""
    unreachable_pipeline.add_interceptor(RecordingInterceptor(0, before=hello_world_response))

    response = unreachable_pipeline.execute(mock_request)
    assert response is hello_world_response
    assert response.text_content() == "hello world"
    assert unreachable_transport.calls == 0


def test_after_hook_substitutes_on_failure(unreachable_pipeline, mock_request, hello_world_response):
    """Verifies that an after-hook can supply a response when the transport fails."""
    unreachable_pipeline.add_interceptor(RecordingInterceptor(0, after=hello_world_response))
    assert unreachable_pipeline.execute(mock_request) is hello_world_response


def test_higher_priority_short_circuit_wins(unreachable_pipeline, mock_request, call_log):
    """Verifies that P10's before-hook short-circuits before P0 is consulted and that its response is final."""
    p10 = RecordingInterceptor(10, WebResponse.from_text("hello1"), WebResponse.from_text("hello2"), call_log=call_log)
    p0 = RecordingInterceptor(0, WebResponse.from_text("hello3"), WebResponse.from_text("hello4"), call_log=call_log)
    unreachable_pipeline.add_interceptor(p10)
    unreachable_pipeline.add_interceptor(p0)

    response = unreachable_pipeline.execute(mock_request)
    assert response is not None and response.text_content() == "hello1"

    # P0's before-hook is skipped while both after-hooks still run, each once
    assert call_log == [("before", "P10"), ("after", "P10"), ("after", "P0")]
    assert p0.after_calls[0][0] is response


def test_single_interceptor_with_both_hooks(unreachable_pipeline, mock_request):
    """Verifies that the before-hook response of a single interceptor is returned over its after-hook response."""
    unreachable_pipeline.add_interceptor(
        RecordingInterceptor(0, WebResponse.from_text("hello1"), WebResponse.from_text("hello2"))
    )
    assert unreachable_pipeline.execute(mock_request).text_content() == "hello1"


def test_transport_only(stub_pipeline, stub_transport, mock_request):
    """Verifies that without interceptors the transport response is returned."""
    stub_pipeline.add_interceptor(RecordingInterceptor(0))
    stub_pipeline.remove_all_interceptors()

    response = stub_pipeline.execute(mock_request)
    assert response.is_success()
    assert response.text_content() == "ok"
    assert stub_transport.requests == [mock_request]


def test_hooks_run_in_descending_priority(stub_pipeline, mock_request, call_log):
    """Verifies that both phases run in the same descending priority order, with ties in registration order."""
    for name, priority in [("low", -5), ("first_tie", 3), ("high", 20), ("second_tie", 3)]:
        stub_pipeline.add_interceptor(RecordingInterceptor(priority, name=name, call_log=call_log))

    stub_pipeline.execute(mock_request)

    order = ["high", "first_tie", "second_tie", "low"]
    assert call_log == [("before", name) for name in order] + [("after", name) for name in order]


def test_after_hook_substitution_is_seen_by_later_hooks(stub_pipeline, mock_request, ok_response):
    """Verifies that a substituted response replaces the candidate for later hooks but not earlier ones."""
    replacement = WebResponse.from_text("replaced", status_code=203)
    first = RecordingInterceptor(30)
    substituting = RecordingInterceptor(20, after=replacement)
    last = RecordingInterceptor(10)
    for interceptor in (last, substituting, first):
        stub_pipeline.add_interceptor(interceptor)

    response = stub_pipeline.execute(mock_request)

    assert response is replacement
    assert first.after_calls == [(ok_response, None)]
    assert substituting.after_calls == [(ok_response, None)]
    assert last.after_calls == [(replacement, None)]


def test_failure_is_passed_to_every_after_hook(unreachable_pipeline, mock_request, hello_world_response):
    """Verifies that the transport failure stays visible after a hook has substituted a response."""
    substituting = RecordingInterceptor(10, after=hello_world_response)
    observer = RecordingInterceptor(0)
    unreachable_pipeline.add_interceptor(substituting)
    unreachable_pipeline.add_interceptor(observer)

    assert unreachable_pipeline.execute(mock_request) is hello_world_response
    response, failure = observer.after_calls[0]
    assert response is hello_world_response
    assert isinstance(failure, TransportException)


def test_duplicate_registration_runs_twice(stub_pipeline, mock_request, call_log):
    interceptor = RecordingInterceptor(1, call_log=call_log)
    stub_pipeline.add_interceptor(interceptor)
    stub_pipeline.add_interceptor(interceptor)

    stub_pipeline.execute(mock_request)
    assert call_log.count(("before", "P1")) == 2
    assert call_log.count(("after", "P1")) == 2


def test_registration_during_execution_does_not_affect_it(stub_pipeline, mock_request, call_log):
    """Verifies that an interceptor added by a hook mid-execution only applies to later executions."""
    late = RecordingInterceptor(100, name="late", call_log=call_log)

    class RegisteringInterceptor(RecordingInterceptor):
        def before_invocation(self, request):
            stub_pipeline.add_interceptor(late)
            return super().before_invocation(request)

    stub_pipeline.add_interceptor(RegisteringInterceptor(0, name="registering", call_log=call_log))
    stub_pipeline.execute(mock_request)
    assert ("before", "late") not in call_log and ("after", "late") not in call_log

    call_log.clear()
    stub_pipeline.remove_all_interceptors()
    stub_pipeline.add_interceptor(late)
    stub_pipeline.execute(mock_request)
    assert call_log == [("before", "late"), ("after", "late")]


def test_concurrent_executions(mock_request):
    """Verifies that concurrent executions and registry mutations complete without errors."""
    registry = InterceptorRegistry()
    pipeline = ExecutionPipeline(transport=StubTransport(), registry=registry)
    errors = []

    def execute():
        try:
            for _ in range(50):
                assert pipeline.execute(mock_request) is not None
        except Exception as e:  # pragma: no cover
            errors.append(e)

    def mutate():
        for priority in range(50):
            interceptor = RecordingInterceptor(priority)
            registry.add(interceptor)
            registry.remove(interceptor)

    threads = [threading.Thread(target=execute) for _ in range(4)] + [threading.Thread(target=mutate)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert not errors
    assert len(registry) == 0


def test_none_request_fails_fast(stub_pipeline):
    with pytest.raises(InvocationParameterException):
        stub_pipeline.execute(None)


def test_transport_failure_is_logged(unreachable_pipeline, mock_request, caplog):
    caplog.set_level("DEBUG", logger="web_invoker")
    assert unreachable_pipeline.execute(mock_request) is None
    assert f"Unable to fetch a response from url: {mock_request.url}" in caplog.text


def test_web_invoker_uses_pipeline(unreachable_pipeline, hello_world_response):
    """Verifies the convenience helpers return interceptor responses and None on failures."""
    invoker = WebInvoker(unreachable_pipeline)
    assert invoker.get_response("http://localhost/hit") is None

    interceptor = RecordingInterceptor(0, before=hello_world_response)
    unreachable_pipeline.add_interceptor(interceptor)
    assert invoker.fetch_response("http://localhost/hit") == "hello world"
    unreachable_pipeline.remove_interceptor(interceptor)

    assert invoker.fetch_response("http://localhost/hit") is None
