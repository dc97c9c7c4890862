"""Client for the Para API server."""

from paraclient.client.app_settings import AppSettingsMixin
from paraclient.client.auth import AccessTokenMixin
from paraclient.client.base import JWT_PATH, BaseClient
from paraclient.client.constraints import ConstraintsMixin
from paraclient.client.links import LinksMixin
from paraclient.client.misc import MiscMixin
from paraclient.client.permissions import PermissionsMixin
from paraclient.client.persistence import PersistenceMixin
from paraclient.client.search import SearchMixin
from paraclient.client.utils import UtilsMixin


class ParaClient(
    PersistenceMixin,
    SearchMixin,
    LinksMixin,
    UtilsMixin,
    MiscMixin,
    ConstraintsMixin,
    PermissionsMixin,
    AppSettingsMixin,
    AccessTokenMixin,
):
    """Client for one app on a Para API server.

    Requests are signed with the app's keys, sent anonymously when only the
    access key is known, or carry the JWT of a signed-in user:

        >>> with ParaClient("app:myapp", "secret", "http://localhost:8080") as client:
        ...     cat = client.create(ParaObject(type="cat", name="Tom"))
        ...     client.find_query("cat", "Tom")

    Failed calls return None or an empty result and log the server's error;
    they do not raise. An instance is not safe for concurrent use from
    several threads.
    """


__all__ = ["JWT_PATH", "BaseClient", "ParaClient"]
