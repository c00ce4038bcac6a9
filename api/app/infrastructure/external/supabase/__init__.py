"""
Integración con Supabase vía su API REST (PostgREST).

El cliente se construye una sola vez al iniciar la aplicación y se comparte
entre todas las peticiones concurrentes: solo guarda configuración
(URL, clave) y un pool HTTP, sin estado mutable por petición.
"""
