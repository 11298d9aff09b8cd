import asyncio


def install_uvloop() -> bool:
    """ set uvloop as default loop policy for asyncio, when available. """
    try:
        import uvloop
    except ImportError:
        return False
    if not isinstance(asyncio.get_event_loop_policy(), uvloop.EventLoopPolicy):
        asyncio.set_event_loop_policy(uvloop.EventLoopPolicy())
    return True
