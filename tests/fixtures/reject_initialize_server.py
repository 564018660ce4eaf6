"""
Stdio child that answers the MCP initialize request with a JSON-RPC error,
then waits for stdin to close.
"""

import json
import sys

request = json.loads(sys.stdin.readline())
error = {
    "jsonrpc": "2.0",
    "id": request["id"],
    "error": {"code": -32600, "message": "initialize rejected"},
}
sys.stdout.write(json.dumps(error) + "\n")
sys.stdout.flush()

for _ in sys.stdin:
    pass
