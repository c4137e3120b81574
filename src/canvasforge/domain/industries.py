"""Static subject-domain tables.

One entry per subject domain, in classification order: the classifier
tests keyword lists top to bottom and the first hit wins, so a domain whose
keywords are more specific must sit above a broader one that shares them.

Image ids are Unsplash photo ids; the directive renderer expands them into
URLs.
"""

# ruff: noqa: E501

from __future__ import annotations

from typing import Any

FALLBACK_DOMAIN_ID = "consulting"

INDUSTRY_TABLE: tuple[dict[str, Any], ...] = (
    {
        "id": "restaurant",
        "name": "Restaurant & Dining",
        "keywords": ["restaurant", "cafe", "bistro", "dining", "food", "culinary", "eatery", "bar", "pub", "bakery", "catering", "kitchen", "menu"],
        "color_schemes": [
            {"id": "warm-earth", "name": "Warm Earth", "primary": "#b45309", "secondary": "#78350f", "accent": "#fbbf24", "background": "#fffbeb", "foreground": "#1c1917", "muted": "#78716c", "card_bg": "#fef3c7", "gradients": ["from-amber-900 via-orange-800 to-yellow-700", "from-stone-900 to-amber-950"]},
            {"id": "elegant-dark", "name": "Elegant Dark", "primary": "#dc2626", "secondary": "#450a0a", "accent": "#fcd34d", "background": "#0c0a09", "foreground": "#fafaf9", "muted": "#a8a29e", "card_bg": "#1c1917", "gradients": ["from-red-950 via-stone-950 to-black", "from-amber-950 to-red-950"]},
            {"id": "fresh-modern", "name": "Fresh Modern", "primary": "#16a34a", "secondary": "#166534", "accent": "#f97316", "background": "#f0fdf4", "foreground": "#052e16", "muted": "#6b7280", "card_bg": "#dcfce7", "gradients": ["from-green-900 to-emerald-800", "from-orange-500 to-amber-500"]},
        ],
        "font_pairings": [
            {"id": "fp1", "heading": "Playfair Display", "body": "Lato", "accent": "Cormorant Garamond", "style": "classic"},
            {"id": "fp2", "heading": "Josefin Sans", "body": "Open Sans", "style": "modern"},
            {"id": "fp3", "heading": "Abril Fatface", "body": "Poppins", "style": "bold"},
        ],
        "hero_variants": [
            {"id": "h1", "name": "Full Image Overlay", "layout": "full-image", "has_video": False, "cta_style": "dual", "decorative_elements": ["blur-orb", "badge"]},
            {"id": "h2", "name": "Split Menu Preview", "layout": "split-right", "has_video": False, "cta_style": "dual", "decorative_elements": ["dish-image", "rating-badge"]},
            {"id": "h3", "name": "Video Background", "layout": "centered", "has_video": True, "cta_style": "single", "decorative_elements": ["scroll-indicator"]},
        ],
        "section_arrangements": [
            ["hero", "features", "menu", "about", "testimonials", "gallery", "cta", "footer"],
            ["hero", "stats", "menu", "chef", "gallery", "testimonials", "booking", "footer"],
            ["hero", "about", "features", "menu", "gallery", "faq", "cta", "footer"],
        ],
        "visual_effects": [
            {"id": "ve1", "card_style": "rounded-2xl shadow-xl", "hover_effect": "hover:-translate-y-2 hover:shadow-2xl", "animation_type": "fade-up", "glassmorphism": False, "gradient_overlay": True},
            {"id": "ve2", "card_style": "rounded-lg border border-amber-200/20", "hover_effect": "hover:border-primary/50", "animation_type": "stagger", "glassmorphism": True, "gradient_overlay": True},
        ],
        "icon_sets": ["utensils", "chef-hat", "wine", "coffee", "cake", "pizza", "salad", "clock", "map-pin", "phone", "calendar"],
        "image_ids": ["photo-1517248135467-4c7edcad34c4", "photo-1414235077428-338989a2e8c0", "photo-1504674900247-0877df9cc836", "photo-1555396273-367ea4eb4db5"],
    },
    {
        "id": "salon",
        "name": "Salon & Beauty",
        "keywords": ["salon", "spa", "beauty", "hair", "nails", "skincare", "wellness", "cosmetics", "barber", "aesthetics", "massage", "salon_spa", "salon-spa"],
        "color_schemes": [
            {"id": "soft-rose", "name": "Soft Rose", "primary": "#db2777", "secondary": "#9d174d", "accent": "#fbbf24", "background": "#fdf2f8", "foreground": "#1f2937", "muted": "#9ca3af", "card_bg": "#fce7f3", "gradients": ["from-pink-600 via-rose-500 to-pink-400", "from-rose-900 to-pink-800"]},
            {"id": "luxury-gold", "name": "Luxury Gold", "primary": "#d97706", "secondary": "#92400e", "accent": "#ec4899", "background": "#0a0a0a", "foreground": "#fafafa", "muted": "#a1a1aa", "card_bg": "#18181b", "gradients": ["from-amber-500 via-yellow-500 to-amber-400", "from-zinc-900 to-neutral-950"]},
            {"id": "serene-lavender", "name": "Serene Lavender", "primary": "#8b5cf6", "secondary": "#6d28d9", "accent": "#f472b6", "background": "#faf5ff", "foreground": "#1e1b4b", "muted": "#7c7c8a", "card_bg": "#f3e8ff", "gradients": ["from-violet-600 to-purple-500", "from-fuchsia-500 to-pink-500"]},
        ],
        "font_pairings": [
            {"id": "fp1", "heading": "Cormorant Garamond", "body": "Montserrat", "style": "classic"},
            {"id": "fp2", "heading": "Tenor Sans", "body": "Nunito", "style": "minimal"},
            {"id": "fp3", "heading": "Italiana", "body": "Quicksand", "accent": "Great Vibes", "style": "classic"},
        ],
        "hero_variants": [
            {"id": "h1", "name": "Glamour Split", "layout": "split-left", "has_video": False, "cta_style": "dual", "decorative_elements": ["sparkle-icon", "badge"]},
            {"id": "h2", "name": "Centered Elegance", "layout": "centered", "has_video": False, "cta_style": "dual", "decorative_elements": ["blur-orb", "decorative-line"]},
            {"id": "h3", "name": "Diagonal Drama", "layout": "diagonal", "has_video": False, "cta_style": "single", "decorative_elements": ["geometric-shape"]},
        ],
        "section_arrangements": [
            ["hero", "services", "about", "team", "gallery", "testimonials", "booking", "footer"],
            ["hero", "stats", "services", "pricing", "gallery", "faq", "cta", "footer"],
            ["hero", "features", "services", "about", "testimonials", "gallery", "cta", "footer"],
        ],
        "visual_effects": [
            {"id": "ve1", "card_style": "rounded-3xl shadow-lg shadow-pink-500/10", "hover_effect": "hover:shadow-pink-500/20 hover:-translate-y-1", "animation_type": "fade-up", "glassmorphism": True, "gradient_overlay": True},
            {"id": "ve2", "card_style": "rounded-xl border-2 border-pink-200/30", "hover_effect": "hover:border-primary", "animation_type": "scale", "glassmorphism": False, "gradient_overlay": False},
        ],
        "icon_sets": ["scissors", "sparkles", "gem", "palette", "crown", "bath", "spray-can", "flower-2", "heart", "star"],
        "image_ids": ["photo-1560066984-138dadb4c035", "photo-1522337360788-8b13dee7a37e", "photo-1487412720507-e7ab37603c6f", "photo-1516975080664-ed2fc6a32937"],
    },
    {
        "id": "realestate",
        "name": "Real Estate",
        "keywords": ["real estate", "real_estate", "real-estate", "realestate", "property", "homes", "apartments", "realtor", "broker", "housing", "mortgage", "listings", "investment", "rental"],
        "color_schemes": [
            {"id": "corporate-navy", "name": "Corporate Navy", "primary": "#1e40af", "secondary": "#1e3a8a", "accent": "#3b82f6", "background": "#f8fafc", "foreground": "#0f172a", "muted": "#64748b", "card_bg": "#ffffff", "gradients": ["from-blue-900 via-indigo-900 to-slate-900", "from-slate-800 to-blue-900"]},
            {"id": "luxury-dark", "name": "Luxury Dark", "primary": "#c9a962", "secondary": "#8b7355", "accent": "#ffffff", "background": "#0a0a0a", "foreground": "#fafafa", "muted": "#a1a1aa", "card_bg": "#171717", "gradients": ["from-amber-600 via-yellow-700 to-amber-800", "from-neutral-900 to-stone-950"]},
            {"id": "fresh-green", "name": "Fresh Green", "primary": "#059669", "secondary": "#047857", "accent": "#10b981", "background": "#f0fdf4", "foreground": "#022c22", "muted": "#6b7280", "card_bg": "#ecfdf5", "gradients": ["from-emerald-800 to-teal-700", "from-green-900 to-emerald-900"]},
        ],
        "font_pairings": [
            {"id": "fp1", "heading": "Playfair Display", "body": "Source Sans Pro", "style": "classic"},
            {"id": "fp2", "heading": "Montserrat", "body": "Open Sans", "style": "modern"},
            {"id": "fp3", "heading": "Libre Baskerville", "body": "Lato", "style": "classic"},
        ],
        "hero_variants": [
            {"id": "h1", "name": "Property Showcase", "layout": "full-image", "has_video": False, "cta_style": "dual", "decorative_elements": ["search-bar", "badge"]},
            {"id": "h2", "name": "Split Featured", "layout": "split-right", "has_video": False, "cta_style": "dual", "decorative_elements": ["property-card", "stats-mini"]},
            {"id": "h3", "name": "Video Tour", "layout": "centered", "has_video": True, "cta_style": "dual", "decorative_elements": ["play-button"]},
        ],
        "section_arrangements": [
            ["hero", "search", "featured", "stats", "services", "testimonials", "cta", "footer"],
            ["hero", "stats", "listings", "about", "team", "testimonials", "faq", "footer"],
            ["hero", "features", "listings", "neighborhoods", "about", "gallery", "cta", "footer"],
        ],
        "visual_effects": [
            {"id": "ve1", "card_style": "rounded-xl shadow-md", "hover_effect": "hover:-translate-y-2 hover:shadow-xl", "animation_type": "fade-up", "glassmorphism": False, "gradient_overlay": True},
            {"id": "ve2", "card_style": "rounded-2xl border border-gray-200", "hover_effect": "hover:border-primary hover:shadow-lg", "animation_type": "stagger", "glassmorphism": False, "gradient_overlay": False},
        ],
        "icon_sets": ["home", "building", "key", "door-open", "bed-double", "sofa", "trees", "ruler", "map-pin", "phone", "mail"],
        "image_ids": ["photo-1560518883-ce09059eeffa", "photo-1600596542815-ffad4c1539a9", "photo-1600585154340-be6161a56a0c", "photo-1512917774080-9991f1c4c750"],
    },
    {
        "id": "consulting",
        "name": "Consulting & Business",
        "keywords": ["consulting", "business", "advisory", "coaching", "coach", "coaching_consulting", "strategy", "management", "corporate", "executive", "professional", "agency", "mentor", "consultant"],
        "color_schemes": [
            {"id": "professional-blue", "name": "Professional Blue", "primary": "#2563eb", "secondary": "#1d4ed8", "accent": "#06b6d4", "background": "#ffffff", "foreground": "#111827", "muted": "#6b7280", "card_bg": "#f9fafb", "gradients": ["from-blue-600 via-indigo-600 to-blue-700", "from-slate-900 to-blue-950"]},
            {"id": "executive-dark", "name": "Executive Dark", "primary": "#3b82f6", "secondary": "#1e40af", "accent": "#22d3ee", "background": "#030712", "foreground": "#f9fafb", "muted": "#9ca3af", "card_bg": "#111827", "gradients": ["from-gray-900 via-slate-900 to-zinc-900", "from-blue-950 to-indigo-950"]},
            {"id": "growth-green", "name": "Growth Green", "primary": "#10b981", "secondary": "#059669", "accent": "#3b82f6", "background": "#f8fafc", "foreground": "#0f172a", "muted": "#64748b", "card_bg": "#ffffff", "gradients": ["from-emerald-600 to-teal-600", "from-teal-800 to-cyan-800"]},
        ],
        "font_pairings": [
            {"id": "fp1", "heading": "Plus Jakarta Sans", "body": "Inter", "style": "modern"},
            {"id": "fp2", "heading": "DM Sans", "body": "Source Sans Pro", "style": "modern"},
            {"id": "fp3", "heading": "Manrope", "body": "Nunito Sans", "style": "minimal"},
        ],
        "hero_variants": [
            {"id": "h1", "name": "Bold Statement", "layout": "centered", "has_video": False, "cta_style": "dual", "decorative_elements": ["gradient-text", "blur-orb", "badge"]},
            {"id": "h2", "name": "Data-Driven", "layout": "split-left", "has_video": False, "cta_style": "dual", "decorative_elements": ["chart-graphic", "stats-mini"]},
            {"id": "h3", "name": "Trust Builder", "layout": "split-right", "has_video": False, "cta_style": "single", "decorative_elements": ["client-logos", "badge"]},
        ],
        "section_arrangements": [
            ["hero", "logos", "services", "about", "process", "testimonials", "cta", "footer"],
            ["hero", "stats", "services", "case-studies", "team", "faq", "contact", "footer"],
            ["hero", "features", "process", "about", "testimonials", "pricing", "cta", "footer"],
        ],
        "visual_effects": [
            {"id": "ve1", "card_style": "rounded-xl bg-white shadow-lg border border-gray-100", "hover_effect": "hover:shadow-xl hover:-translate-y-1", "animation_type": "fade-up", "glassmorphism": False, "gradient_overlay": True},
            {"id": "ve2", "card_style": "rounded-2xl bg-gradient-to-br from-white to-gray-50 border border-gray-200/50", "hover_effect": "hover:border-primary/30", "animation_type": "stagger", "glassmorphism": True, "gradient_overlay": False},
        ],
        "icon_sets": ["briefcase", "trending-up", "bar-chart-3", "target", "lightbulb", "users", "award", "rocket", "shield-check"],
        "image_ids": ["photo-1552664730-d307ca884978", "photo-1542744173-8e7e53415bb0", "photo-1573497019940-1c28c88b4f3e", "photo-1553484771-047a44eee27a"],
    },
    {
        "id": "ecommerce",
        "name": "E-commerce & Retail",
        "keywords": ["ecommerce", "e-commerce", "shop", "store", "retail", "boutique", "fashion", "products", "marketplace", "shopping", "apparel", "clothing", "online store"],
        "color_schemes": [
            {"id": "minimal-mono", "name": "Minimal Mono", "primary": "#000000", "secondary": "#171717", "accent": "#f97316", "background": "#ffffff", "foreground": "#0a0a0a", "muted": "#737373", "card_bg": "#fafafa", "gradients": ["from-neutral-900 to-stone-900", "from-gray-800 to-neutral-900"]},
            {"id": "vibrant-fashion", "name": "Vibrant Fashion", "primary": "#ec4899", "secondary": "#be185d", "accent": "#8b5cf6", "background": "#fafafa", "foreground": "#18181b", "muted": "#71717a", "card_bg": "#ffffff", "gradients": ["from-pink-500 via-rose-500 to-red-500", "from-purple-600 to-pink-600"]},
            {"id": "luxury-black", "name": "Luxury Black", "primary": "#c9a962", "secondary": "#a68a4b", "accent": "#ffffff", "background": "#000000", "foreground": "#ffffff", "muted": "#a1a1aa", "card_bg": "#0a0a0a", "gradients": ["from-amber-500 to-yellow-600", "from-zinc-900 to-black"]},
        ],
        "font_pairings": [
            {"id": "fp1", "heading": "Bebas Neue", "body": "Lato", "style": "bold"},
            {"id": "fp2", "heading": "Italiana", "body": "Montserrat", "style": "classic"},
            {"id": "fp3", "heading": "Space Grotesk", "body": "Inter", "style": "modern"},
        ],
        "hero_variants": [
            {"id": "h1", "name": "Product Focus", "layout": "split-right", "has_video": False, "cta_style": "dual", "decorative_elements": ["product-image", "sale-badge"]},
            {"id": "h2", "name": "Full Collection", "layout": "full-image", "has_video": False, "cta_style": "dual", "decorative_elements": ["category-pills", "scroll-indicator"]},
            {"id": "h3", "name": "Lifestyle Shot", "layout": "layered", "has_video": True, "cta_style": "single", "decorative_elements": ["floating-products"]},
        ],
        "section_arrangements": [
            ["hero", "categories", "featured", "sale", "about", "testimonials", "newsletter", "footer"],
            ["hero", "products", "bestsellers", "features", "instagram", "faq", "cta", "footer"],
            ["hero", "trending", "categories", "lookbook", "reviews", "newsletter", "footer"],
        ],
        "visual_effects": [
            {"id": "ve1", "card_style": "rounded-lg overflow-hidden group", "hover_effect": "hover:shadow-lg", "animation_type": "fade-in", "glassmorphism": False, "gradient_overlay": False},
            {"id": "ve2", "card_style": "rounded-xl shadow-sm border border-gray-100", "hover_effect": "hover:-translate-y-2 hover:shadow-xl", "animation_type": "stagger", "glassmorphism": False, "gradient_overlay": False},
        ],
        "icon_sets": ["shopping-bag", "heart", "star", "truck", "shield-check", "rotate-ccw", "tag", "credit-card", "package", "gift"],
        "image_ids": ["photo-1441984904996-e0b6ba687e04", "photo-1607082348824-0a96f2a4b9da", "photo-1472851294608-062f824d29cc", "photo-1483985988355-763728e1935b"],
    },
    {
        "id": "fitness",
        "name": "Fitness & Gym",
        "keywords": ["fitness", "gym", "workout", "training", "health", "exercise", "sports", "yoga", "crossfit", "personal trainer", "athletics"],
        "color_schemes": [
            {"id": "energy-orange", "name": "Energy Orange", "primary": "#f97316", "secondary": "#ea580c", "accent": "#facc15", "background": "#0a0a0a", "foreground": "#fafafa", "muted": "#a1a1aa", "card_bg": "#171717", "gradients": ["from-orange-600 via-red-600 to-orange-500", "from-amber-500 to-orange-600"]},
            {"id": "power-red", "name": "Power Red", "primary": "#dc2626", "secondary": "#b91c1c", "accent": "#fbbf24", "background": "#18181b", "foreground": "#ffffff", "muted": "#a1a1aa", "card_bg": "#27272a", "gradients": ["from-red-600 to-rose-600", "from-red-900 to-black"]},
            {"id": "zen-green", "name": "Zen Green", "primary": "#22c55e", "secondary": "#16a34a", "accent": "#06b6d4", "background": "#f0fdf4", "foreground": "#052e16", "muted": "#6b7280", "card_bg": "#dcfce7", "gradients": ["from-green-600 to-emerald-500", "from-teal-600 to-cyan-500"]},
        ],
        "font_pairings": [
            {"id": "fp1", "heading": "Oswald", "body": "Open Sans", "style": "bold"},
            {"id": "fp2", "heading": "Anton", "body": "Roboto", "style": "bold"},
            {"id": "fp3", "heading": "Chakra Petch", "body": "Nunito", "style": "modern"},
        ],
        "hero_variants": [
            {"id": "h1", "name": "Action Shot", "layout": "full-image", "has_video": False, "cta_style": "dual", "decorative_elements": ["stats-overlay", "badge"]},
            {"id": "h2", "name": "Video Motivation", "layout": "centered", "has_video": True, "cta_style": "dual", "decorative_elements": ["play-button", "testimonial-mini"]},
            {"id": "h3", "name": "Trainer Focus", "layout": "split-left", "has_video": False, "cta_style": "single", "decorative_elements": ["trainer-image", "certification-badges"]},
        ],
        "section_arrangements": [
            ["hero", "stats", "programs", "trainers", "schedule", "testimonials", "pricing", "footer"],
            ["hero", "features", "classes", "about", "gallery", "faq", "cta", "footer"],
            ["hero", "transformation", "programs", "pricing", "trainers", "testimonials", "contact", "footer"],
        ],
        "visual_effects": [
            {"id": "ve1", "card_style": "rounded-xl bg-zinc-900 border border-zinc-800", "hover_effect": "hover:border-primary hover:shadow-primary/20 hover:shadow-lg", "animation_type": "fade-up", "glassmorphism": False, "gradient_overlay": True},
            {"id": "ve2", "card_style": "rounded-2xl overflow-hidden", "hover_effect": "hover:scale-[1.02]", "animation_type": "scale", "glassmorphism": True, "gradient_overlay": True},
        ],
        "icon_sets": ["dumbbell", "heart-pulse", "timer", "flame", "target", "trophy", "users", "calendar", "play-circle", "zap"],
        "image_ids": ["photo-1534438327276-14e5300c3a48", "photo-1517836357463-d25dfeac3438", "photo-1571019614242-c5c5dee9f50b"],
    },
    {
        "id": "healthcare",
        "name": "Healthcare & Medical",
        "keywords": ["healthcare", "medical", "clinic", "hospital", "doctor", "dental", "therapy", "wellness", "pharmacy", "care", "health"],
        "color_schemes": [
            {"id": "trust-blue", "name": "Trust Blue", "primary": "#0ea5e9", "secondary": "#0284c7", "accent": "#22d3ee", "background": "#f0f9ff", "foreground": "#0c4a6e", "muted": "#64748b", "card_bg": "#e0f2fe", "gradients": ["from-sky-600 to-cyan-500", "from-blue-700 to-sky-600"]},
            {"id": "calming-teal", "name": "Calming Teal", "primary": "#14b8a6", "secondary": "#0d9488", "accent": "#2dd4bf", "background": "#f0fdfa", "foreground": "#134e4a", "muted": "#6b7280", "card_bg": "#ccfbf1", "gradients": ["from-teal-600 to-emerald-500", "from-cyan-700 to-teal-600"]},
            {"id": "clean-white", "name": "Clean White", "primary": "#3b82f6", "secondary": "#2563eb", "accent": "#10b981", "background": "#ffffff", "foreground": "#1e293b", "muted": "#64748b", "card_bg": "#f8fafc", "gradients": ["from-blue-600 to-indigo-600", "from-slate-700 to-blue-800"]},
        ],
        "font_pairings": [
            {"id": "fp1", "heading": "DM Sans", "body": "Inter", "style": "modern"},
            {"id": "fp2", "heading": "Nunito", "body": "Open Sans", "style": "minimal"},
            {"id": "fp3", "heading": "Poppins", "body": "Source Sans Pro", "style": "modern"},
        ],
        "hero_variants": [
            {"id": "h1", "name": "Trust & Care", "layout": "split-right", "has_video": False, "cta_style": "dual", "decorative_elements": ["doctor-image", "trust-badges"]},
            {"id": "h2", "name": "Clean Centered", "layout": "centered", "has_video": False, "cta_style": "dual", "decorative_elements": ["medical-icons", "badge"]},
            {"id": "h3", "name": "Modern Facility", "layout": "full-image", "has_video": False, "cta_style": "single", "decorative_elements": ["stats-overlay", "scroll-indicator"]},
        ],
        "section_arrangements": [
            ["hero", "services", "about", "team", "testimonials", "faq", "appointment", "footer"],
            ["hero", "stats", "services", "process", "team", "testimonials", "contact", "footer"],
            ["hero", "features", "services", "about", "gallery", "faq", "cta", "footer"],
        ],
        "visual_effects": [
            {"id": "ve1", "card_style": "rounded-2xl bg-white shadow-sm border border-blue-100", "hover_effect": "hover:shadow-md hover:border-primary/30", "animation_type": "fade-up", "glassmorphism": False, "gradient_overlay": False},
            {"id": "ve2", "card_style": "rounded-xl bg-gradient-to-br from-white to-sky-50", "hover_effect": "hover:-translate-y-1 hover:shadow-lg", "animation_type": "stagger", "glassmorphism": False, "gradient_overlay": False},
        ],
        "icon_sets": ["heart-pulse", "stethoscope", "activity", "pill", "syringe", "users", "calendar", "clock", "shield-check", "phone"],
        "image_ids": ["photo-1576091160550-2173dba999ef", "photo-1519494026892-80bbd2d6fd0d", "photo-1551076805-e1869033e561"],
    },
    {
        "id": "technology",
        "name": "Technology & SaaS",
        "keywords": ["technology", "saas", "software", "app", "startup", "tech", "digital", "platform", "ai", "cloud", "fintech"],
        "color_schemes": [
            {"id": "cyber-purple", "name": "Cyber Purple", "primary": "#8b5cf6", "secondary": "#7c3aed", "accent": "#22d3ee", "background": "#030712", "foreground": "#f9fafb", "muted": "#9ca3af", "card_bg": "#111827", "gradients": ["from-violet-600 via-purple-600 to-indigo-600", "from-purple-900 to-indigo-950"]},
            {"id": "neon-blue", "name": "Neon Blue", "primary": "#3b82f6", "secondary": "#2563eb", "accent": "#06b6d4", "background": "#0a0a0a", "foreground": "#ffffff", "muted": "#a1a1aa", "card_bg": "#171717", "gradients": ["from-blue-600 to-cyan-500", "from-blue-900 to-slate-950"]},
            {"id": "clean-modern", "name": "Clean Modern", "primary": "#6366f1", "secondary": "#4f46e5", "accent": "#10b981", "background": "#ffffff", "foreground": "#111827", "muted": "#6b7280", "card_bg": "#f9fafb", "gradients": ["from-indigo-600 to-purple-600", "from-slate-800 to-indigo-900"]},
        ],
        "font_pairings": [
            {"id": "fp1", "heading": "Space Grotesk", "body": "Inter", "style": "modern"},
            {"id": "fp2", "heading": "Syne", "body": "DM Sans", "style": "bold"},
            {"id": "fp3", "heading": "Outfit", "body": "Nunito Sans", "style": "modern"},
        ],
        "hero_variants": [
            {"id": "h1", "name": "Product Demo", "layout": "split-right", "has_video": False, "cta_style": "dual", "decorative_elements": ["app-screenshot", "floating-ui", "badge"]},
            {"id": "h2", "name": "Gradient Statement", "layout": "centered", "has_video": False, "cta_style": "dual", "decorative_elements": ["gradient-text", "blur-orbs", "grid-pattern"]},
            {"id": "h3", "name": "Video Showcase", "layout": "centered", "has_video": True, "cta_style": "dual", "decorative_elements": ["play-button", "logos-mini"]},
        ],
        "section_arrangements": [
            ["hero", "logos", "features", "product", "pricing", "testimonials", "faq", "cta", "footer"],
            ["hero", "stats", "features", "how-it-works", "integrations", "pricing", "testimonials", "footer"],
            ["hero", "benefits", "product", "features", "case-studies", "pricing", "cta", "footer"],
        ],
        "visual_effects": [
            {"id": "ve1", "card_style": "rounded-2xl bg-gray-900/50 border border-gray-800 backdrop-blur-sm", "hover_effect": "hover:border-primary/50 hover:shadow-primary/10 hover:shadow-xl", "animation_type": "fade-up", "glassmorphism": True, "gradient_overlay": True},
            {"id": "ve2", "card_style": "rounded-xl bg-gradient-to-br from-gray-900 to-gray-800 border border-gray-700", "hover_effect": "hover:-translate-y-1 hover:border-primary", "animation_type": "stagger", "glassmorphism": False, "gradient_overlay": True},
        ],
        "icon_sets": ["zap", "rocket", "code", "cloud", "database", "shield-check", "cpu", "globe", "layers", "sparkles"],
        "image_ids": ["photo-1558618666-fcd25c85f82e", "photo-1542744094-3a31f272c490", "photo-1559028012-481c04fa702d"],
    },
    {
        "id": "localservice",
        "name": "Local Service",
        "keywords": ["local", "service", "local_service", "local-service", "plumber", "plumbing", "hvac", "electrician", "contractor", "handyman", "repair", "maintenance", "cleaning", "landscaping", "roofing", "painting", "moving", "pest control", "locksmith"],
        "color_schemes": [
            {"id": "trust-blue", "name": "Trust Blue", "primary": "#0284c7", "secondary": "#0369a1", "accent": "#f97316", "background": "#f8fafc", "foreground": "#0f172a", "muted": "#64748b", "card_bg": "#ffffff", "gradients": ["from-sky-600 to-blue-700", "from-slate-800 to-sky-900"]},
            {"id": "professional-navy", "name": "Professional Navy", "primary": "#1e40af", "secondary": "#1e3a8a", "accent": "#fbbf24", "background": "#ffffff", "foreground": "#111827", "muted": "#6b7280", "card_bg": "#f9fafb", "gradients": ["from-blue-800 to-indigo-900", "from-slate-900 to-blue-950"]},
            {"id": "reliable-green", "name": "Reliable Green", "primary": "#15803d", "secondary": "#166534", "accent": "#0ea5e9", "background": "#f0fdf4", "foreground": "#052e16", "muted": "#6b7280", "card_bg": "#dcfce7", "gradients": ["from-green-700 to-emerald-800", "from-teal-800 to-green-900"]},
        ],
        "font_pairings": [
            {"id": "fp1", "heading": "DM Sans", "body": "Inter", "style": "modern"},
            {"id": "fp2", "heading": "Poppins", "body": "Open Sans", "style": "modern"},
            {"id": "fp3", "heading": "Nunito", "body": "Lato", "style": "minimal"},
        ],
        "hero_variants": [
            {"id": "h1", "name": "Service Hero", "layout": "split-left", "has_video": False, "cta_style": "dual", "decorative_elements": ["trust-badges", "phone-number", "badge"]},
            {"id": "h2", "name": "Emergency CTA", "layout": "centered", "has_video": False, "cta_style": "dual", "decorative_elements": ["emergency-badge", "service-icons"]},
            {"id": "h3", "name": "Before/After", "layout": "split-right", "has_video": False, "cta_style": "dual", "decorative_elements": ["comparison-image", "rating-badge"]},
        ],
        "section_arrangements": [
            ["hero", "services", "about", "areas", "testimonials", "faq", "cta", "footer"],
            ["hero", "stats", "services", "process", "gallery", "testimonials", "contact", "footer"],
            ["hero", "features", "services", "about", "team", "testimonials", "cta", "footer"],
        ],
        "visual_effects": [
            {"id": "ve1", "card_style": "rounded-xl bg-white shadow-md border border-gray-100", "hover_effect": "hover:shadow-lg hover:-translate-y-1", "animation_type": "fade-up", "glassmorphism": False, "gradient_overlay": False},
            {"id": "ve2", "card_style": "rounded-2xl bg-gradient-to-br from-white to-gray-50 shadow-sm", "hover_effect": "hover:shadow-xl hover:border-primary/30", "animation_type": "stagger", "glassmorphism": False, "gradient_overlay": False},
        ],
        "icon_sets": ["wrench", "tool", "hammer", "zap", "droplet", "thermometer", "home", "shield-check", "clock", "phone", "map-pin", "truck"],
        "image_ids": ["photo-1581578731548-c64695cc6952", "photo-1562259949-e8e7689d7828", "photo-1504307651254-35680f356dfd", "photo-1621905251189-08b45d6a269e"],
    },
    {
        "id": "creator",
        "name": "Creator & Portfolio",
        "keywords": ["creator", "portfolio", "creator_portfolio", "creator-portfolio", "artist", "designer", "photographer", "freelance", "creative", "illustrator", "developer", "writer", "videographer", "influencer", "content creator", "personal brand"],
        "color_schemes": [
            {"id": "minimal-dark", "name": "Minimal Dark", "primary": "#ffffff", "secondary": "#a1a1aa", "accent": "#f97316", "background": "#09090b", "foreground": "#fafafa", "muted": "#71717a", "card_bg": "#18181b", "gradients": ["from-zinc-800 to-neutral-900", "from-stone-900 to-black"]},
            {"id": "creative-purple", "name": "Creative Purple", "primary": "#a855f7", "secondary": "#9333ea", "accent": "#ec4899", "background": "#0a0a0a", "foreground": "#ffffff", "muted": "#a1a1aa", "card_bg": "#171717", "gradients": ["from-purple-600 via-fuchsia-500 to-pink-500", "from-violet-900 to-purple-950"]},
            {"id": "clean-minimal", "name": "Clean Minimal", "primary": "#18181b", "secondary": "#27272a", "accent": "#3b82f6", "background": "#ffffff", "foreground": "#0a0a0a", "muted": "#737373", "card_bg": "#fafafa", "gradients": ["from-gray-900 to-zinc-800", "from-slate-700 to-gray-800"]},
        ],
        "font_pairings": [
            {"id": "fp1", "heading": "Space Grotesk", "body": "Inter", "style": "modern"},
            {"id": "fp2", "heading": "Syne", "body": "DM Sans", "style": "bold"},
            {"id": "fp3", "heading": "Playfair Display", "body": "Lato", "style": "classic"},
        ],
        "hero_variants": [
            {"id": "h1", "name": "Minimal Statement", "layout": "centered", "has_video": False, "cta_style": "single", "decorative_elements": ["gradient-text", "minimal-line"]},
            {"id": "h2", "name": "Work Showcase", "layout": "split-right", "has_video": False, "cta_style": "dual", "decorative_elements": ["portfolio-grid", "badge"]},
            {"id": "h3", "name": "Video Reel", "layout": "full-image", "has_video": True, "cta_style": "single", "decorative_elements": ["play-button", "scroll-indicator"]},
        ],
        "section_arrangements": [
            ["hero", "work", "about", "services", "testimonials", "contact", "footer"],
            ["hero", "portfolio", "about", "skills", "testimonials", "cta", "footer"],
            ["hero", "featured", "about", "services", "clients", "contact", "footer"],
        ],
        "visual_effects": [
            {"id": "ve1", "card_style": "rounded-lg overflow-hidden group", "hover_effect": "hover:scale-[1.02]", "animation_type": "fade-in", "glassmorphism": False, "gradient_overlay": False},
            {"id": "ve2", "card_style": "rounded-xl border border-zinc-800", "hover_effect": "hover:border-white/30", "animation_type": "stagger", "glassmorphism": False, "gradient_overlay": False},
        ],
        "icon_sets": ["palette", "camera", "pen-tool", "code", "video", "music", "image", "layers", "sparkles", "award", "mail"],
        "image_ids": ["photo-1507003211169-0a1dd7228f2d", "photo-1493863641943-9b68992a8d07", "photo-1542038784456-1ea8e935640e", "photo-1618005182384-a83a8bd57fbe"],
    },
    {
        "id": "nonprofit",
        "name": "Nonprofit & Charity",
        "keywords": ["nonprofit", "non-profit", "charity", "foundation", "ngo", "cause", "volunteer", "donation", "community", "social", "mission", "impact", "give", "help"],
        "color_schemes": [
            {"id": "warm-heart", "name": "Warm Heart", "primary": "#e11d48", "secondary": "#be123c", "accent": "#fbbf24", "background": "#ffffff", "foreground": "#1e293b", "muted": "#64748b", "card_bg": "#fff1f2", "gradients": ["from-rose-600 to-pink-600", "from-red-700 to-rose-800"]},
            {"id": "nature-green", "name": "Nature Green", "primary": "#16a34a", "secondary": "#15803d", "accent": "#0ea5e9", "background": "#f0fdf4", "foreground": "#052e16", "muted": "#6b7280", "card_bg": "#dcfce7", "gradients": ["from-green-600 to-emerald-600", "from-teal-700 to-green-800"]},
            {"id": "trust-blue", "name": "Trust Blue", "primary": "#2563eb", "secondary": "#1d4ed8", "accent": "#f97316", "background": "#f8fafc", "foreground": "#0f172a", "muted": "#64748b", "card_bg": "#eff6ff", "gradients": ["from-blue-600 to-indigo-600", "from-slate-800 to-blue-900"]},
        ],
        "font_pairings": [
            {"id": "fp1", "heading": "DM Sans", "body": "Inter", "style": "modern"},
            {"id": "fp2", "heading": "Nunito", "body": "Open Sans", "style": "minimal"},
            {"id": "fp3", "heading": "Poppins", "body": "Lato", "style": "modern"},
        ],
        "hero_variants": [
            {"id": "h1", "name": "Impact Statement", "layout": "centered", "has_video": False, "cta_style": "dual", "decorative_elements": ["impact-stats", "donate-button", "badge"]},
            {"id": "h2", "name": "Story Split", "layout": "split-left", "has_video": False, "cta_style": "dual", "decorative_elements": ["beneficiary-image", "mission-badge"]},
            {"id": "h3", "name": "Video Story", "layout": "full-image", "has_video": True, "cta_style": "dual", "decorative_elements": ["play-button", "donate-cta"]},
        ],
        "section_arrangements": [
            ["hero", "mission", "impact", "programs", "stories", "donate", "newsletter", "footer"],
            ["hero", "stats", "about", "team", "testimonials", "events", "cta", "footer"],
            ["hero", "features", "impact", "stories", "partners", "faq", "donate", "footer"],
        ],
        "visual_effects": [
            {"id": "ve1", "card_style": "rounded-2xl bg-white shadow-md border border-gray-100", "hover_effect": "hover:shadow-lg hover:-translate-y-1", "animation_type": "fade-up", "glassmorphism": False, "gradient_overlay": False},
            {"id": "ve2", "card_style": "rounded-xl bg-gradient-to-br from-white to-rose-50/50", "hover_effect": "hover:shadow-xl hover:border-primary/30", "animation_type": "stagger", "glassmorphism": False, "gradient_overlay": False},
        ],
        "icon_sets": ["heart", "hand-heart", "users", "globe", "sprout", "home", "gift", "star", "medal", "calendar", "mail"],
        "image_ids": ["photo-1559027615-cd4628902d4a", "photo-1593113630400-ea4288922497", "photo-1469571486292-0ba58a3f068b", "photo-1532629345422-7515f3d16bb6"],
    },
)
