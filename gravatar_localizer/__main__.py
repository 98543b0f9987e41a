from gravatar_localizer.main import main

main()
