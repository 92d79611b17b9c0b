"""Catalog of recognized README section templates and their seed content."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional


class SectionTemplate(str, Enum):
    FEATURES = "Features"
    INSTALLATION = "Installation"
    CONTRIBUTING = "Contributing"
    ACKNOWLEDGEMENTS = "Acknowledgements"
    AUTHORS = "Authors"

    @classmethod
    def lookup(cls, title: str) -> Optional["SectionTemplate"]:
        """Return the template whose title matches exactly, or None for a custom title."""

        for template in cls:
            if template.value == title:
                return template
        return None

    @property
    def seed(self) -> str:
        return _SEEDS[self]


_SEEDS: Dict[SectionTemplate, str] = {
    SectionTemplate.FEATURES: """## Features

- Easy to use
- Customizable
- Cross-platform compatibility
- Regular updates""",
    SectionTemplate.INSTALLATION: """## Installation

```bash
npm install my-project
cd my-project
npm start
```""",
    SectionTemplate.CONTRIBUTING: """## Contributing

Contributions are always welcome!

Please adhere to this project's `code of conduct`.

1. Fork the Project
2. Create your Feature Branch (`git checkout -b feature/AmazingFeature`)
3. Commit your Changes (`git commit -m 'Add some AmazingFeature'`)
4. Push to the Branch (`git push origin feature/AmazingFeature`)
5. Open a Pull Request""",
    SectionTemplate.ACKNOWLEDGEMENTS: """## Acknowledgements

- [Awesome Readme Templates](https://awesomeopensource.com/project/elangosundar/awesome-README-templates)
- [Awesome README](https://github.com/matiassingers/awesome-readme)
- [How to write a Good readme](https://bulldogjob.com/news/449-how-to-write-a-good-readme-for-your-github-project)""",
    SectionTemplate.AUTHORS: """## Authors

- [@yourusername](https://www.github.com/yourusername)

## 🚀 About Me
I'm a full stack developer...""",
}


def seed_content(title: str) -> str:
    """Seed content for a new section; custom titles start empty."""

    template = SectionTemplate.lookup(title)
    return template.seed if template is not None else ""


def template_titles() -> List[str]:
    return [template.value for template in SectionTemplate]
