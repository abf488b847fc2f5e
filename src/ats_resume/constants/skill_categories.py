"""
Constants for grouping flat skill strings into resume categories.
"""

# Fallback bucket for skills that match nothing.
OTHER_CATEGORY = "Other"

# ============================================================================
# KEYWORD DETECTION - case-insensitive substring match, first category wins.
# Iteration order matters: "javascript" must hit Frontend before Backend's "java".

SKILL_CATEGORY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "Frontend": (
        "react",
        "vue",
        "angular",
        "svelte",
        "next",
        "nuxt",
        "gatsby",
        "typescript",
        "javascript",
        "html",
        "css",
        "sass",
        "scss",
        "tailwind",
        "redux",
        "mobx",
        "webpack",
        "vite",
        "babel",
        "jest",
        "testing-library",
    ),
    "Backend": (
        # Node
        "node",
        "express",
        "fastify",
        "nest",
        "koa",
        # Python
        "python",
        "django",
        "flask",
        "fastapi",
        # JVM
        "java",
        "spring",
        "kotlin",
        # Go
        "go",
        "golang",
        "gin",
        # Ruby
        "ruby",
        "rails",
        # PHP
        "php",
        "laravel",
        # API styles
        "graphql",
        "rest",
        "api",
        "grpc",
    ),
    "Database": (
        "postgres",
        "postgresql",
        "mysql",
        "sqlite",
        "mariadb",
        "mongodb",
        "dynamodb",
        "redis",
        "elasticsearch",
        "sql",
        "nosql",
        "prisma",
        "typeorm",
        "sequelize",
        "mongoose",
    ),
    "Cloud": (
        "aws",
        "azure",
        "gcp",
        "google cloud",
        "docker",
        "kubernetes",
        "k8s",
        "terraform",
        "serverless",
        "lambda",
        "cloudformation",
    ),
    "DevOps": (
        "jenkins",
        "github actions",
        "gitlab ci",
        "circleci",
        "ci/cd",
        "ansible",
        "argocd",
        "prometheus",
        "grafana",
    ),
    "Tools": (
        "git",
        "github",
        "gitlab",
        "bitbucket",
        "jira",
        "confluence",
        "slack",
        "vscode",
        "vim",
        "postman",
        "figma",
        "linux",
        "bash",
        "shell",
    ),
}

# ============================================================================
# EXPLICIT PREFIXES - "Category: Skill" where the category is user supplied.
# Keys are lowercase; values are canonical category names.

CATEGORY_ALIASES: dict[str, str] = {
    "frontend": "Frontend",
    "backend": "Backend",
    "database": "Database",
    "cloud": "Cloud",
    "devops": "DevOps",
    "ci/cd": "DevOps",
    "cicd": "DevOps",
    "mobile": "Mobile",
    "ios": "Mobile",
    "android": "Mobile",
    "api": "API",
    "apis": "API",
    "testing": "Testing",
    "qa": "Testing",
    "security": "Security",
    "auth": "Security",
    "data": "Data",
    "analytics": "Data",
    "ml": "AI & ML",
    "ai": "AI & ML",
    "ai & ml": "AI & ML",
    "ai&ml": "AI & ML",
    "devtools": "Tools",
    "cli": "Tools",
    "tools": "Tools",
    "os": "Operating Systems",
    "linux": "Operating Systems",
    "windows": "Operating Systems",
    "operating systems": "Operating Systems",
    "networking": "Networking",
    "architecture": "Architecture",
    "system design": "Architecture",
    "cms": "CMS",
    "game": "Game Development",
    "gamedev": "Game Development",
    "game development": "Game Development",
    "other": OTHER_CATEGORY,
}

# Order in which category lines appear in the Skills section.
CATEGORY_ORDER: tuple[str, ...] = (
    "Frontend",
    "Backend",
    "Mobile",
    "Database",
    "Cloud",
    "DevOps",
    "API",
    "Testing",
    "Security",
    "Data",
    "AI & ML",
    "Tools",
    "Operating Systems",
    "Networking",
    "Architecture",
    "CMS",
    "Game Development",
    OTHER_CATEGORY,
)
