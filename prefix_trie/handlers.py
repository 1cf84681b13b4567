import json
import typing

from tornado.web import HTTPError, RequestHandler

from prefix_trie.colors import InvalidHexError
from prefix_trie.index import ColorIndex

if typing.TYPE_CHECKING:
    from prefix_trie.service import TrieService


class BaseAPIHandler(RequestHandler):
    def initialize(self, service: "TrieService" = None, **kwargs):
        super().initialize(**kwargs)
        self.service = service

    def write_error(self, status_code, **kwargs):
        err_type, err, err_tb = (None, None, None)
        if "exc_info" in kwargs:
            err_type, err, err_tb = kwargs["exc_info"]
        if not isinstance(err, HTTPError):  # Only log exceptions
            self.service.log.error(f"Error in handler for {self.request.method} {self.request.path}: {err}")
        return super().write_error(status_code, **kwargs)

    def on_finish(self):
        # log function called when any response is finished
        code = self.get_status()
        if code < 400:
            log_func = self.service.log.info
        elif code < 500:
            log_func = self.service.log.warning
        else:
            log_func = self.service.log.error
        log_func(f"{code} {self.request.method.upper()} {self.request.path}")

    def prepare(self):
        self.is_authorized()

    def is_authorized(self):
        if not self.service.auth_token:
            return

        auth = self.request.headers.get("authorization", "")
        auth = auth.strip()
        if auth and auth.startswith("token") and self.service.auth_token == auth[len("token") :].strip():
            return
        self.service.log.debug(f"Rejecting API request from: {auth or 'no authorization'}")
        raise HTTPError(403)

    def write_json(self, data, status=200):
        self.set_status(status)
        self.set_header("Content-Type", "application/json")
        self.write(json.dumps(data))
        self.finish()


class KeysHandler(BaseAPIHandler):
    def get(self, key: str = None):
        # GET /api/keys/(key) gets a single key
        if key:
            node = self.service.get_key(key)
            if node is None:
                raise HTTPError(404)
            self.write_json(
                {
                    "key": self.service.index.clean_key(key),
                    "count": node.count,
                    "label": node.label,
                }
            )
            return

        # GET /api/keys?prefix=.. lists keys starting with prefix
        prefix = self.service.index.clean_key(self.get_query_argument("prefix", ""))
        limit = self.get_query_argument("limit", None)
        if limit is not None:
            try:
                limit = int(limit)
            except ValueError:
                raise HTTPError(400, "Invalid limit '%s', must be an integer.", limit)
            if limit < 0:
                raise HTTPError(400, "Invalid limit '%s', must not be negative.", limit)

        self.write_json(
            {
                "prefix": prefix,
                "exists": self.service.has_prefix(prefix),
                "keys": self.service.complete(prefix, limit),
            }
        )

    def post(self, key: str = None):
        # POST inserts a key, or counts one more occurrence of it
        if not key:
            raise HTTPError(400, "Must specify a key in the path")
        try:
            data = json.loads(self.request.body) if self.request.body else {}
        except ValueError:
            raise HTTPError(400, "Body must be valid JSON")
        if not isinstance(data, dict):
            raise HTTPError(400, "Body must be a JSON object")

        self.service.add_key(key, data.get("label"))
        self.set_status(201)
        self.finish()

    def delete(self, key: str = None):
        # DELETE removes an existing key
        if key and self.service.remove_key(key):
            self.set_status(204)
        else:
            self.set_status(404)
        self.finish()


class ColorHandler(BaseAPIHandler):
    def get(self, hex_code: str):
        if not isinstance(self.service.index, ColorIndex):
            raise HTTPError(404, "Color lookups are not available for this index")
        try:
            color = self.service.lookup_color(hex_code)
        except InvalidHexError as err:
            raise HTTPError(400, "%s", err, reason="invalid hex value entered")
        if color is None:
            raise HTTPError(404)
        self.write_json({"hex": color.hex, "name": color.name, "rgb": list(color.rgb)})


class TreeHandler(BaseAPIHandler):
    def get(self):
        self.set_status(200)
        self.set_header("Content-Type", "text/plain; charset=UTF-8")
        self.write(self.service.tree())
        self.finish()
