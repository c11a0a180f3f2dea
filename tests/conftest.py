from tests.fixtures.responses import mock_url, mock_request, hello_world_response, ok_response
from tests.fixtures.interceptors import (call_log, stub_transport, unreachable_transport, registry,
                                         stub_pipeline, unreachable_pipeline)
