from types import SimpleNamespace

SAMPLE_ANALYSIS = {
    "differences": [
        {
            "type": "deletion",
            "content": "cat",
            "location": "first sentence",
            "significance": "The subject animal was removed.",
        },
        {
            "type": "addition",
            "content": "dog",
            "location": "first sentence",
            "significance": "A dog is now the subject.",
        },
        {
            "type": "modification",
            "content": "happily",
            "location": "end of the first sentence",
            "significance": "Adds a mood to the action.",
        },
    ],
    "summary": "The cat became a dog that sits happily.",
    "impactAnalysis": "The tone of the sentence is lighter.",
}


def completion(content):
    """Shape of an OpenAI chat completion, as far as the service reads it."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])
