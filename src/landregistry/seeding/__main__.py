from landregistry.seeding.runner import main

main()
