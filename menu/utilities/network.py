import socket

"""Network helpers for the launcher.

`get_local_ip` finds an address other devices on the LAN can reach;
`server_urls` builds the two URLs printed on startup.
"""


def get_local_ip() -> str:
    """Return a non-loopback local IP address if possible, otherwise '127.0.0.1'.

    A UDP socket is "connected" to a public address so the OS picks the
    outgoing interface; no packet is sent.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def server_urls(port: int) -> tuple[str, str | None]:
    """Return (local_url, lan_url); lan_url is None when only loopback is available."""
    local_url = f"http://localhost:{port}"
    local_ip = get_local_ip()
    if local_ip in ("127.0.0.1", "localhost"):
        return local_url, None
    return local_url, f"http://{local_ip}:{port}"
