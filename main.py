from log_analyzer.main import main


if __name__ == "__main__":
    main()
