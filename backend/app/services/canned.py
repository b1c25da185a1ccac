"""
Canned markdown documents served by the mock chat endpoint.
"""
import asyncio
import random
from typing import Optional

CANNED_RESPONSES = (
    """Here's a simple markdown example:
# Heading 1
## Heading 2
- List item 1
- List item 2

```javascript
const code = "This is a code block";
console.log(code);
```

*italic* and **bold** text.""",

    """Let me explain with a table:
| Feature | Description |
|---------|-------------|
| Tables | Easy to create |
| Lists | Very useful |
| Code | Syntax highlighted |

> This is a blockquote
> With multiple lines""",

    """Here's how to use markdown:
1. Start with headers
2. Add some **bold** text
3. Include `inline code`

---
### Links and Images
[Example Link](https://example.com)
![Image Alt Text](https://example.com/image.jpg)""",

    """Let's talk about code:
```python
def hello_world():
    print("Hello, World!")
    return True
```

And some inline math: `E = mc^2`

* Bullet point 1
* Bullet point 2
  * Nested point
  * Another nested point""",
)


def pick_response(rng: Optional[random.Random] = None) -> str:
    """Pick one canned document uniformly at random."""
    return (rng or random).choice(CANNED_RESPONSES)


async def simulate_latency(delay_seconds: float) -> None:
    """Suspend the current request only; other requests keep running."""
    if delay_seconds > 0:
        await asyncio.sleep(delay_seconds)
