"""Predefined section payloads sellers can drop into a design."""
import copy
from typing import Any, Dict, List, Optional

from .catalog import DEFAULT_SECTION_STYLES, countdown_end_date


def _styles(**overrides):
    styles = copy.deepcopy(DEFAULT_SECTION_STYLES)
    styles.update(overrides)
    return styles


SECTION_TEMPLATES: List[Dict[str, Any]] = [
    {
        "id": "tpl_sales_hero",
        "name": "Sales Hero",
        "description": "Dark bg, bold heading, countdown CTA",
        "category": "Conversion",
        "thumbnail": "🔥",
        "section": {
            "type": "hero",
            "visible": True,
            "settings": {"heading": "🔥 Flash Sale — 50% OFF Everything", "subheading": "Limited time only. Don't miss out!", "bgColor": "#0f172a", "textColor": "#ffffff", "ctaText": "Grab the Deal", "ctaLink": "#products", "textAlign": "center", "bgImage": ""},
            "styles": _styles(padding={"top": "80", "bottom": "80", "left": "24", "right": "24"}),
        },
    },
    {
        "id": "tpl_product_showcase",
        "name": "Product Showcase 3-Col",
        "description": "Featured products with clean grid",
        "category": "Commerce",
        "thumbnail": "🛍️",
        "section": {
            "type": "featured_products",
            "visible": True,
            "settings": {"title": "🌟 Best Sellers", "productIds": [], "columns": 3},
            "styles": _styles(backgroundGradient={"enabled": True, "from": "#f8fafc", "to": "#e2e8f0", "direction": "180deg"}),
        },
    },
    {
        "id": "tpl_trust_strip",
        "name": "Trust Strip",
        "description": "Badges + stats in one compact row",
        "category": "Social Proof",
        "thumbnail": "🛡️",
        "section": {
            "type": "stats",
            "visible": True,
            "settings": {"items": [
                {"label": "Secure Checkout", "value": "🔒", "icon": ""},
                {"label": "Instant Delivery", "value": "⚡", "icon": ""},
                {"label": "Money Back", "value": "💰", "icon": ""},
                {"label": "24/7 Support", "value": "💬", "icon": ""},
            ]},
            "styles": _styles(
                padding={"top": "24", "bottom": "24", "left": "24", "right": "24"},
                backgroundGradient={"enabled": True, "from": "#1e293b", "to": "#0f172a", "direction": "90deg"},
            ),
        },
    },
    {
        "id": "tpl_video_testimonials",
        "name": "Video + Testimonials",
        "description": "Video embed with social proof",
        "category": "Social Proof",
        "thumbnail": "🎥",
        "section": {
            "type": "testimonials",
            "visible": True,
            "settings": {"title": "⭐ What Our Customers Say", "items": [
                {"name": "Sarah K.", "text": "Absolutely incredible products! Fast delivery and premium quality.", "rating": 5},
                {"name": "Mike R.", "text": "Best purchase I've made this year. Highly recommend!", "rating": 5},
                {"name": "Emily L.", "text": "Outstanding customer service and beautiful products.", "rating": 5},
            ]},
            "styles": _styles(),
        },
    },
    {
        "id": "tpl_pricing_comparison",
        "name": "Pricing Comparison",
        "description": "3-tier pricing with popular badge",
        "category": "Commerce",
        "thumbnail": "💎",
        "section": {
            "type": "pricing_table",
            "visible": True,
            "settings": {"title": "Simple, Transparent Pricing", "plans": [
                {"name": "Starter", "price": "$9", "period": "/mo", "features": ["1 Product", "Basic Support", "Email Delivery"], "recommended": False, "ctaText": "Start Free", "ctaLink": "#"},
                {"name": "Professional", "price": "$29", "period": "/mo", "features": ["Unlimited Products", "Priority Support", "Analytics Dashboard", "Custom Domain"], "recommended": True, "ctaText": "Go Pro", "ctaLink": "#", "badge": "⭐ Most Popular"},
                {"name": "Enterprise", "price": "$99", "period": "/mo", "features": ["Everything in Pro", "API Access", "Dedicated Manager", "Custom Integrations"], "recommended": False, "ctaText": "Contact Sales", "ctaLink": "#"},
            ]},
            "styles": _styles(),
        },
    },
    {
        "id": "tpl_newsletter_dark",
        "name": "Newsletter Dark",
        "description": "Email capture with gradient bg",
        "category": "Conversion",
        "thumbnail": "📧",
        "section": {
            "type": "newsletter",
            "visible": True,
            "settings": {"title": "📬 Join 10,000+ Subscribers", "subtitle": "Get exclusive deals, early access, and free resources delivered to your inbox.", "placeholder": "Your best email...", "buttonText": "Subscribe Free", "bgColor": "#0f172a", "textColor": "#ffffff"},
            "styles": _styles(
                backgroundGradient={"enabled": True, "from": "#1e1b4b", "to": "#0f172a", "direction": "135deg"},
                padding={"top": "64", "bottom": "64", "left": "24", "right": "24"},
            ),
        },
    },
    {
        "id": "tpl_faq_minimal",
        "name": "FAQ Minimal",
        "description": "Clean accordion Q&A",
        "category": "Content",
        "thumbnail": "❓",
        "section": {
            "type": "faq",
            "visible": True,
            "settings": {"title": "Frequently Asked Questions", "items": [
                {"question": "How do I access my purchase?", "answer": "After payment, you'll receive instant access via email and your dashboard."},
                {"question": "Do you offer refunds?", "answer": "Yes, we offer a 30-day money-back guarantee on all products."},
                {"question": "Can I upgrade my plan later?", "answer": "Absolutely! You can upgrade anytime and only pay the difference."},
                {"question": "Is my payment secure?", "answer": "Yes, all payments are processed through secure, encrypted channels."},
            ]},
            "styles": _styles(),
        },
    },
    {
        "id": "tpl_team_grid",
        "name": "Team Grid",
        "description": "Photo cards with social links",
        "category": "Content",
        "thumbnail": "👥",
        "section": {
            "type": "team",
            "visible": True,
            "settings": {"title": "Meet the Team", "members": [
                {"name": "Alex Johnson", "role": "CEO & Founder", "image": "", "socials": {"twitter": "#", "linkedin": "#"}},
                {"name": "Sarah Williams", "role": "Head of Design", "image": "", "socials": {"twitter": "#", "linkedin": "#"}},
                {"name": "Michael Chen", "role": "Lead Developer", "image": "", "socials": {"twitter": "#", "linkedin": "#"}},
            ], "columns": 3, "variant": "card"},
            "styles": _styles(),
        },
    },
    {
        "id": "tpl_countdown_urgency",
        "name": "Urgency Countdown",
        "description": "Red countdown with bold CTA",
        "category": "Conversion",
        "thumbnail": "⏰",
        "section": {
            "type": "countdown_timer",
            "visible": True,
            # endDate is stamped when the template is used
            "settings": {"title": "⚡ This Deal Expires Soon!", "endDate": "", "expireAction": "hide", "bgColor": "#dc2626", "textColor": "#ffffff", "showDays": True, "showHours": True, "showMinutes": True, "showSeconds": True},
            "styles": _styles(padding={"top": "48", "bottom": "48", "left": "24", "right": "24"}),
        },
        "countdown_days": 3,
    },
    {
        "id": "tpl_about_story",
        "name": "Brand Story",
        "description": "About section with image",
        "category": "Content",
        "thumbnail": "📖",
        "section": {
            "type": "about",
            "visible": True,
            "settings": {"title": "Our Story", "text": "We started with a simple mission: to create products that make a difference. Today, we serve thousands of customers worldwide with passion and dedication.", "imageUrl": "", "imagePosition": "right"},
            "styles": _styles(),
        },
    },
    {
        "id": "tpl_counter_impact",
        "name": "Impact Numbers",
        "description": "Animated counters showing achievements",
        "category": "Social Proof",
        "thumbnail": "🔢",
        "section": {
            "type": "animated_counter",
            "visible": True,
            "settings": {"items": [
                {"value": 50000, "suffix": "+", "label": "Downloads", "icon": "📥"},
                {"value": 120, "suffix": "+", "label": "Countries", "icon": "🌍"},
                {"value": 4.9, "suffix": "⭐", "label": "Rating", "icon": ""},
                {"value": 99, "suffix": "%", "label": "Uptime", "icon": "✅"},
            ], "duration": 2500, "columns": 4},
            "styles": _styles(backgroundGradient={"enabled": True, "from": "#0f172a", "to": "#1e293b", "direction": "180deg"}),
        },
    },
    {
        "id": "tpl_timeline_journey",
        "name": "Company Journey",
        "description": "Milestone timeline",
        "category": "Content",
        "thumbnail": "📅",
        "section": {
            "type": "timeline",
            "visible": True,
            "settings": {"title": "Our Journey", "items": [
                {"year": "2020", "title": "The Beginning", "description": "Started from a small apartment with big dreams"},
                {"year": "2021", "title": "First 1000 Customers", "description": "Reached our first major milestone"},
                {"year": "2022", "title": "International Launch", "description": "Expanded to 50+ countries worldwide"},
                {"year": "2023", "title": "Award Winning", "description": "Recognized as industry leader"},
                {"year": "2024", "title": "The Future", "description": "Continuing to innovate and grow"},
            ], "variant": "alternating"},
            "styles": _styles(),
        },
    },
]

_TEMPLATES_BY_ID = {tpl["id"]: tpl for tpl in SECTION_TEMPLATES}


def get_template(template_id: str) -> Optional[Dict[str, Any]]:
    return _TEMPLATES_BY_ID.get(template_id)


def template_section(template: Dict[str, Any]) -> Dict[str, Any]:
    """Deep copy of a template's section payload, without id or order."""
    section = copy.deepcopy(template["section"])
    if "countdown_days" in template:
        section["settings"]["endDate"] = countdown_end_date(template["countdown_days"])
    return section


def list_templates() -> List[Dict[str, Any]]:
    return [
        {key: tpl[key] for key in ("id", "name", "description", "category", "thumbnail")}
        | {"type": tpl["section"]["type"]}
        for tpl in SECTION_TEMPLATES
    ]
