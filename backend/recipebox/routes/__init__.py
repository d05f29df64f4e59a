# Routes package init
"""
RecipeBox Backend: API Routes Package
=====================================

Route Inventory:
    - recipes.py:  GET/POST /api/recipes, DELETE /api/recipes/{id},
                   PUT /api/recipes/{id}/like, PUT /api/recipes/{id}/favorite
    - uploads.py:  GET /uploads/{filename}
    - health.py:   GET /health

Routes stay thin: extract parameters, call RecipeService, return the envelope.
"""
