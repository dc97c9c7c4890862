"""App-level calls: identity, keys, types, votes and reindexing."""

from typing import Any

from paraclient.adapter.auth import BearerAuth
from paraclient.adapter.http import parse_bool
from paraclient.client.base import BaseClient
from paraclient.domain.model import ParaObject


class MiscMixin(BaseClient):
    """Calls that are not about a particular object."""

    def get_server_version(self) -> str:
        """Version of the API server, "unknown" if it cannot be read."""
        version = self._json_dict(self.invoke_get("")).get("version")
        return str(version) if version else "unknown"

    def me(self, access_token: str | None = None) -> ParaObject | None:
        """The authenticated user or app.

        Args:
            access_token: Identify with this JWT instead of the client's own
                credentials

        Returns:
            User or app object, None if not authenticated
        """
        if access_token:
            response = self.invoke_signed_request(
                "GET", "_me", auth=BearerAuth(access_token)
            )
            return self._entity_object(response)
        return self._entity_object(self.invoke_get("_me"))

    def get_app(self) -> ParaObject | None:
        """The app of the current access key."""
        return self.me()

    def new_keys(self) -> dict[str, Any]:
        """Generate a new pair of keys for the app.

        The old secret key stops working immediately; the client switches to
        the new one.

        Returns:
            The new credentials, empty on failure
        """
        keys = self._json_dict(self.invoke_post("_newkeys"))
        if keys.get("secretKey"):
            self._set_secret_key(keys["secretKey"])
        return keys

    def types(self) -> dict[str, str]:
        """Types registered by the app, plural form mapped to singular."""
        return self._json_dict(self.invoke_get("_types"))

    def vote_up(self, obj: ParaObject | None, voterid: str | None) -> bool:
        """Register a +1 vote on ``obj`` by ``voterid``."""
        return self._vote(obj, voterid, "_voteup")

    def vote_down(self, obj: ParaObject | None, voterid: str | None) -> bool:
        """Register a -1 vote on ``obj`` by ``voterid``."""
        return self._vote(obj, voterid, "_votedown")

    def _vote(self, obj: ParaObject | None, voterid: str | None, key: str) -> bool:
        if obj is None or not voterid:
            return False
        response = self.invoke_patch(f"{obj.type}/{obj.id}", {key: voterid})
        return parse_bool(self.get_entity(response))

    def rebuild_index(self, destination_index: str | None = None) -> dict[str, Any]:
        """Rebuild the app's search index.

        Args:
            destination_index: Existing index to rebuild into

        Returns:
            Server report with "tookMillis" and "reindexed", empty on failure
        """
        if destination_index:
            response = self.invoke_signed_request(
                "POST", "_reindex", {"destinationIndex": destination_index}
            )
        else:
            response = self.invoke_post("_reindex")
        return self._json_dict(response)
