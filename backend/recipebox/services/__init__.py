# Services package init
"""
RecipeBox Backend: Services Layer
=================================

What:  Logic between routes (HTTP) and persistence (SQL + upload directory).
How:   Route handlers receive RecipeStore and FileService through FastAPI
       dependencies and pass them to RecipeService explicitly.

Service Inventory:
    - RecipeStore:   SQL statements against the recipes table
    - FileService:   upload writes, best-effort deletes, public URLs
    - RecipeService: create/delete orchestration and response shaping
"""
