"""Skill taxonomy: career field -> category -> canonical skill -> synonyms.

The taxonomy is loaded once per process and never mutated afterwards.
Synonyms are lowercase and may span several words.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from config import settings

logger = logging.getLogger(__name__)

DEFAULT_FIELD = "Software Development"

# Fields offered to students. DevOps Engineering and Mobile Development have
# no taxonomy of their own and resolve to the default field.
AVAILABLE_FIELDS: tuple[str, ...] = (
    "Software Development",
    "Data Science",
    "Frontend Development",
    "Backend Development",
    "DevOps Engineering",
    "Mobile Development",
)

SKILLS_DATABASE: dict[str, dict[str, dict[str, list[str]]]] = {
    "Software Development": {
        "core": {
            "JavaScript": ["javascript", "js", "es6", "es2015", "ecmascript", "vanilla js", "typescript", "ts"],
            "Python": ["python", "py", "python3", "django", "flask", "fastapi"],
            "Java": ["java", "java8", "java11", "java17", "spring", "spring boot", "hibernate"],
            "C++": ["c++", "cpp", "c plus plus", "stl", "boost"],
            "C#": ["c#", "csharp", ".net", "dotnet", "asp.net", ".net core"],
        },
        "web": {
            "HTML": ["html", "html5", "semantic html", "web development"],
            "CSS": ["css", "css3", "scss", "sass", "less", "styled-components", "tailwind"],
            "React": ["react", "reactjs", "react.js", "react native", "redux", "hooks"],
            "Angular": ["angular", "angularjs", "angular2+", "ng", "typescript"],
            "Vue.js": ["vue", "vuejs", "vue.js", "vuex", "nuxt"],
            "Node.js": ["node", "nodejs", "node.js", "express", "nestjs", "deno"],
        },
        "database": {
            "SQL": ["sql", "mysql", "postgresql", "database", "rdbms", "oracle"],
            "MongoDB": ["mongodb", "mongo", "nosql", "mongoose", "document db"],
            "Redis": ["redis", "caching", "in-memory", "key-value"],
            "PostgreSQL": ["postgresql", "postgres", "psql"],
        },
        "tools": {
            "Git": ["git", "github", "gitlab", "bitbucket", "version control"],
            "Docker": ["docker", "containerization", "kubernetes", "k8s", "container"],
            "AWS": ["aws", "amazon web services", "cloud", "ec2", "s3", "lambda"],
            "Linux": ["linux", "unix", "bash", "shell scripting", "command line"],
        },
    },
    "Frontend Development": {
        "core": {
            "JavaScript": ["javascript", "js", "es6", "es2015", "typescript", "ts"],
            "HTML": ["html", "html5", "semantic html", "accessibility", "a11y"],
            "CSS": ["css", "css3", "scss", "sass", "less", "styled-components", "tailwind"],
        },
        "frameworks": {
            "React": ["react", "reactjs", "react.js", "hooks", "redux", "context api"],
            "Vue.js": ["vue", "vuejs", "vue.js", "vuex", "composition api"],
            "Angular": ["angular", "angularjs", "angular2+", "rxjs", "ngrx"],
            "Next.js": ["next", "nextjs", "next.js", "ssr", "static site"],
            "Svelte": ["svelte", "sveltekit", "reactive"],
        },
        "tools": {
            "Webpack": ["webpack", "bundler", "module bundler"],
            "Jest": ["jest", "testing", "unit test", "react testing library"],
            "TypeScript": ["typescript", "ts", "type safety"],
            "GraphQL": ["graphql", "apollo", "relay"],
        },
        "design": {
            "UI/UX": ["ui design", "ux design", "user interface", "user experience", "figma", "sketch"],
            "Responsive Design": ["responsive", "mobile first", "media queries"],
            "CSS Frameworks": ["bootstrap", "material ui", "tailwind", "chakra ui"],
        },
    },
    "Backend Development": {
        "core": {
            "Node.js": ["node", "nodejs", "express", "nestjs", "fastify"],
            "Python": ["python", "django", "flask", "fastapi", "sqlalchemy"],
            "Java": ["java", "spring", "spring boot", "hibernate", "jakarta ee"],
            "Go": ["golang", "go lang", "goroutines", "gin"],
            "PHP": ["php", "laravel", "symfony", "composer"],
        },
        "database": {
            "SQL": ["sql", "mysql", "postgresql", "oracle", "sql server"],
            "NoSQL": ["mongodb", "dynamodb", "cassandra", "couchbase"],
            "GraphQL": ["graphql", "apollo server", "prisma"],
            "Redis": ["redis", "caching", "pub/sub", "session store"],
        },
        "architecture": {
            "Microservices": ["microservices", "service mesh", "api gateway"],
            "REST": ["rest", "restful", "api design", "swagger", "openapi"],
            "Message Queues": ["rabbitmq", "kafka", "redis pub/sub", "sqs"],
        },
        "devops": {
            "Docker": ["docker", "containerization", "docker-compose"],
            "Kubernetes": ["kubernetes", "k8s", "container orchestration"],
            "CI/CD": ["jenkins", "github actions", "gitlab ci", "travis"],
        },
    },
    "Data Science": {
        "core": {
            "Python": ["python", "py", "python3", "numpy", "pandas"],
            "R": ["r programming", "r language", "rstudio", "tidyverse"],
            "SQL": ["sql", "mysql", "postgresql", "database querying"],
            "Statistics": ["statistics", "statistical analysis", "hypothesis testing", "probability"],
            "Machine Learning": ["machine learning", "ml", "deep learning", "neural networks", "ai"],
        },
        "libraries": {
            "TensorFlow": ["tensorflow", "tf", "keras", "deep learning"],
            "PyTorch": ["pytorch", "torch", "neural networks"],
            "Scikit-learn": ["scikit-learn", "sklearn", "machine learning"],
            "Pandas": ["pandas", "pd", "data manipulation"],
            "NumPy": ["numpy", "np", "numerical computing"],
            "SciPy": ["scipy", "scientific computing"],
            "Matplotlib": ["matplotlib", "plt", "data visualization"],
            "Seaborn": ["seaborn", "sns", "statistical visualization"],
        },
        "tools": {
            "Jupyter": ["jupyter", "jupyter notebook", "jupyter lab", "colab"],
            "Git": ["git", "github", "version control"],
            "Docker": ["docker", "containerization"],
            "Spark": ["spark", "pyspark", "apache spark", "big data"],
            "Hadoop": ["hadoop", "hdfs", "mapreduce", "big data"],
        },
        "concepts": {
            "Data Visualization": ["visualization", "dashboards", "tableau", "power bi"],
            "Big Data": ["big data", "hadoop", "spark", "distributed computing"],
            "NLP": ["natural language processing", "nlp", "text analysis", "bert"],
        },
    },
}


class SkillTaxonomy:
    """Read-only view over a field/category/skill/synonym mapping.

    Construction validates the shape and copies everything into
    mapping proxies and tuples, so callers can share one instance freely.
    """

    def __init__(self, data: Mapping[str, Any], default_field: str = DEFAULT_FIELD):
        if not isinstance(data, Mapping) or not data:
            raise ValueError("Taxonomy must be a non-empty mapping of fields")

        frozen: dict[str, Mapping[str, Mapping[str, tuple[str, ...]]]] = {}
        for field_name, categories in data.items():
            if not isinstance(categories, Mapping):
                raise ValueError(f"Field {field_name!r} must map categories to skills")
            frozen_categories: dict[str, Mapping[str, tuple[str, ...]]] = {}
            for category, skills in categories.items():
                if not isinstance(skills, Mapping):
                    raise ValueError(f"Category {field_name}/{category} must map skills to synonyms")
                frozen_skills: dict[str, tuple[str, ...]] = {}
                for skill, synonyms in skills.items():
                    if not isinstance(synonyms, (list, tuple)) or not all(isinstance(s, str) for s in synonyms):
                        raise ValueError(f"Synonyms of {skill!r} must be a list of strings")
                    frozen_skills[str(skill)] = tuple(s.lower().strip() for s in synonyms if s.strip())
                frozen_categories[str(category)] = MappingProxyType(frozen_skills)
            frozen[str(field_name)] = MappingProxyType(frozen_categories)

        if default_field not in frozen:
            raise ValueError(f"Default field {default_field!r} has no taxonomy entry")

        self._fields: Mapping[str, Mapping[str, Mapping[str, tuple[str, ...]]]] = MappingProxyType(frozen)
        self.default_field = default_field

    def __contains__(self, field_name: str) -> bool:
        return field_name in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def fields(self) -> list[str]:
        return list(self._fields)

    def has_field(self, field_name: str) -> bool:
        return field_name in self._fields

    def categories(self, field_name: str) -> Mapping[str, Mapping[str, tuple[str, ...]]]:
        return self._fields[field_name]

    def skills_for_field(self, field_name: str) -> dict[str, tuple[str, ...]]:
        """Flatten a field's categories into canonical skill -> synonyms.

        A skill listed under two categories keeps the synonyms of both.
        """
        flat: dict[str, tuple[str, ...]] = {}
        for skills in self._fields[field_name].values():
            for skill, synonyms in skills.items():
                flat[skill] = flat.get(skill, ()) + synonyms
        return flat

    def canonical_skills(self, field_name: str) -> list[str]:
        return list(self.skills_for_field(field_name))

    def all_skills(self) -> set[str]:
        return {
            skill
            for categories in self._fields.values()
            for skills in categories.values()
            for skill in skills
        }

    def resolve_field(self, field_name: str | None) -> tuple[str, bool]:
        """Return (effective field, fell_back) for a requested field.

        No field at all means the default field and is not a fallback.
        """
        if not field_name:
            return self.default_field, False
        if field_name in self._fields:
            return field_name, False
        logger.warning(
            "No skills defined for field: %s, defaulting to %s", field_name, self.default_field
        )
        return self.default_field, True


def load_taxonomy(path: str | Path, default_field: str | None = None) -> SkillTaxonomy:
    """Load a taxonomy from a YAML file shaped like SKILLS_DATABASE."""
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Taxonomy file not found: {filepath}")
    with open(filepath, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    logger.info("Loaded skill taxonomy from %s", filepath)
    return SkillTaxonomy(data, default_field=default_field or settings.default_field)


@lru_cache()
def get_taxonomy() -> SkillTaxonomy:
    """Process-wide taxonomy: the configured YAML file or the built-in data."""
    if settings.taxonomy_file:
        return load_taxonomy(settings.taxonomy_file)
    return SkillTaxonomy(SKILLS_DATABASE, default_field=settings.default_field)
