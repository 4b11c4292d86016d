# site_content.py
# JSON bodies for the page routes. The HTML versions live in views/.

HOME = {
    "message": "Welcome to Thabo's Portfolio",
    "role": "Infrastructure Engineer | IT Solutions Student",
    "links": {
        "about": "/about",
        "portfolio": "/portfolio",
        "contact": "/contact",
        "resume": "/resume",
    },
}

ABOUT = {
    "name": "Balachandran Thabotharan",
    "title": "Infrastructure Engineer",
    "bio": (
        "IT professional with hands-on experience in system administration, "
        "infrastructure engineering, and web application development."
    ),
    "skills": ["Windows Server", "Hyper-V", "VMware", "Node.js", "Express", "MongoDB", "Network Security"],
}

CONTACT = {
    "email": "balathabo96@gmail.com",
    "phone": "(437) 383-1996",
    "linkedin": "https://www.linkedin.com/in/balachandran-thabotharan-261895131",
    "github": "https://github.com/balathabo1996",
    "location": "Scarborough, Ontario, Canada",
}

PROJECTS = [
    {
        "title": "Fleet Operations Management",
        "description": "Managed fleet logistics, fuel tracking, and safety compliance. "
                       "Optimized operational efficiency through data-driven reporting.",
        "tech_stack": ["Fleet Mgmt Software", "Data Analysis", "Logistics"],
        "features": ["Fuel Expense Analysis", "Safety Inspection Compliance", "Fleet Maintenance Scheduling"],
    },
    {
        "title": "Enterprise Virtualization",
        "description": "Designed and implemented scalable Windows-based infrastructure "
                       "with high-availability virtualization.",
        "tech_stack": ["Windows Server", "Hyper-V", "VMware"],
        "features": ["Active Directory", "Server Hardening", "High Availability"],
    },
    {
        "title": "Secure Web Framework",
        "description": "Developed a robust web application backend with integrated "
                       "security protocols and RESTful APIs.",
        "tech_stack": ["Node.js", "Express", "MongoDB"],
        "features": ["Secure Authentication (JWT)", "Database Optimization", "API Rate Limiting"],
    },
    {
        "title": "Disaster Recovery System",
        "description": "Engineered a comprehensive backup and disaster recovery strategy "
                       "ensuring 99.9% data availability.",
        "tech_stack": ["PowerShell", "Security", "Automation"],
        "features": ["Automated Backup Scripts", "Risk Assessment", "Compliance Documentation"],
    },
    {
        "title": "IT Service & Support",
        "description": "Delivering exceptional technical support and customer service, "
                       "resolving complex IT issues.",
        "tech_stack": ["ServiceNow", "Jira", "Communication"],
        "features": ["Incident Management", "Technical Troubleshooting", "User Training"],
    },
    {
        "title": "FoodEarth",
        "description": "A comprehensive MVC web application addressing decision fatigue in the kitchen.",
        "tech_stack": ["Node.js", "Express", "MongoDB", "Handlebars"],
        "features": ["Interactive Meal Planner", "Secure Authentication", "Recipe Management"],
        "link": "https://food-earth.vercel.app/",
    },
]


def portfolio_json() -> list:
    """Projects in display order, keys as the frontend expects them."""
    out = []
    for p in PROJECTS:
        item = {
            "title": p["title"],
            "description": p["description"],
            "techStack": list(p["tech_stack"]),
            "features": list(p["features"]),
        }
        if p.get("link"):
            item["link"] = p["link"]
        out.append(item)
    return out
