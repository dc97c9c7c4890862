"""Observability configuration using Logfire.

The client records its authentication lifecycle (sign-in, token refresh,
sign-out, revocation) as Logfire spans. Outbound requests are traced once
httpx is instrumented.

Usage:
    from paraclient.config import ClientSettings
    from paraclient.util.observability import configure_logfire, instrument_httpx

    settings = ClientSettings()
    configure_logfire(settings)
    instrument_httpx()
"""

import logfire

from paraclient.config import ClientSettings


def configure_logfire(settings: ClientSettings) -> None:
    """Configure Logfire for the client.

    Token Configuration:
    - Set PARA_OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending
    - Can be explicitly controlled with PARA_OBSERVABILITY__SEND_TO_LOGFIRE

    Args:
        settings: Client settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "paraclient",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        endpoint=settings.endpoint,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_httpx() -> None:
    """Instrument httpx with Logfire.

    Traces every request the client sends, including the token refresh
    round trip that may precede a bearer-authenticated call.
    """
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
