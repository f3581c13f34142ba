# dropout-risk mobile client core
# analytics transformation, demo-data resilience, local session and chat stores
