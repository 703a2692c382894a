# Services package init
"""
Folio Backend - Services Layer
===============================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
How:   Services accept validated schemas and the request's session, apply
       business rules, and return ORM records for the routes to serialize.

Service Inventory:
    - RecordStore: Generic create/find/update/delete over one table
    - MediaService: Cloudinary uploads with compensating delete
    - MailService: SMTP notifications (contact form only)
    - KeepAliveService: Background self-ping task owned by the app lifespan
    - ContactService, BlogService, JobService, ChatService, ProductService:
      one per resource
"""
