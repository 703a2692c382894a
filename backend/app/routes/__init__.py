# Routes package init
"""
Folio Backend - API Routes Package
===================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory (all under /api):
    - contact.py:   POST/GET /contact, DELETE /contact/{id}
    - blog.py:      GET /blog, GET /blog/{slug}, POST /blog,
                    PUT/DELETE /blog/{id}
    - jobs.py:      GET /jobs, GET /jobs/{id}, POST /jobs,
                    PUT/DELETE /jobs/{id}
    - chat.py:      GET/POST /chat, DELETE /chat/{id}
    - products.py:  GET/POST /products, PUT/DELETE /products/{id}
    - admin.py:     GET /admin/blogs, GET /admin/jobs
    - health.py:    GET /health

Routes are thin: extract data from the request (body, form, file), call the
service, pick the status code. Errors propagate to the global handlers.
"""
