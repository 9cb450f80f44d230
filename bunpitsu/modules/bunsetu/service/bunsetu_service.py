import asyncio


def get_splitter(request):
    splitter = getattr(request.app.state, "splitter", None)
    if splitter is None:
        raise RuntimeError("Phrase splitter not configured")
    return splitter


async def segment_bunsetu_service(text, request):
    splitter = get_splitter(request)
    return await asyncio.to_thread(splitter.split_into_phrases, text)
