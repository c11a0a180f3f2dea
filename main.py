from web_invoker import WebInvoker, ExecutionPipeline, InvocationInterceptor, WebResponse

# serves a canned response for a single host and leaves every other request to the network
class OfflineHostInterceptor(InvocationInterceptor):
    def __init__(self, host: str, priority: int = 10):
        super().__init__(priority=priority)
        self.host = host

    def before_invocation(self, request):
        if self.host in (request.url or ""):
            return WebResponse.from_text('{"status": "offline"}', original_target=request.url,
                                         content_type="application/json")
        return None

    def after_invocation(self, response, failure):
        return None

# substitutes a placeholder when the network is unavailable
class FallbackInterceptor(InvocationInterceptor):
    def before_invocation(self, request):
        return None

    def after_invocation(self, response, failure):
        if response is None and failure is not None:
            return WebResponse.from_text("unavailable", status_code=503)
        return None


pipeline = ExecutionPipeline()
pipeline.add_interceptor(OfflineHostInterceptor("internal.example"))
pipeline.add_interceptor(FallbackInterceptor(priority=0))

invoker = WebInvoker(pipeline)

for url in ["https://internal.example/status", "https://httpbin.org/get", "http://localhost:9/unreachable"]:
    response = invoker.get_response(url)
    if response is None:
        print(f"{url}: no response")
        continue
    print(f"{url}: {response} ({response.size} bytes) via {response.effective_target()}")
    print(response.trace())
