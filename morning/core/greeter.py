import time

import ollama

from morning.core.prompts import build_prompt


async def generate_greeting(settings, recipients, weather_info, client=None):
    """Ask the local Ollama model for a greeting. Errors propagate to the caller."""
    client = client or ollama.AsyncClient(host=settings.ollama_host)
    prompt = build_prompt([name for name, _ in recipients], weather_info, settings.prompt_template)

    start = time.time()
    response = await client.generate(model=settings.ollama_model, prompt=prompt)
    latency_ms = int((time.time() - start) * 1000)

    text = response["response"].strip()
    print(f"  [ollama] {settings.ollama_model} | {len(text)} chars in {latency_ms}ms")
    return text
