"""Services: the request pipeline and the public client built on it."""
