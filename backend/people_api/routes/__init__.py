# Routes package init
"""
People API · Routes Package
=============================

Route Inventory:
    - root.py:    GET    /                                (welcome text)
    - people.py:  GET    /people/{name}                   (find by name)
                  GET    /person/food/{food}              (find one by food)
                  GET    /person/findByFood               (burrito lovers)
                  PUT    /person/{person_id}/favoriteFood (append hamburger)
                  PUT    /person/updateAge/{person_name}  (set age to 20)
                  DELETE /person/delete/{person_id}       (delete by id)
                  DELETE /person/deleteByName/{name}      (delete by name)

Routes stay THIN: extract the path parameter, call PersonService, pick
the response body type. Errors are raised and formatted by the global
handlers in main.py.
"""
